from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import requests

from ..schemas import HostDescriptor, parse_hosts
from ..settings import settings


def _session() -> requests.Session:
    s = requests.Session()
    s.headers.update({
        "User-Agent": "morocco-seed/0.1",
        "Accept": "application/json",
    })
    return s


SESSION = _session()


def ping_host(host: HostDescriptor, timeout: float = 3.0) -> bool:
    """Any HTTP answer counts; only connection-level failures mean down."""
    try:
        SESSION.get(f"{host.protocol}://{host.url}/1/isalive", timeout=timeout)
    except requests.RequestException:
        return False
    return True


def ping_hosts(hosts: Iterable[HostDescriptor], timeout: float = 3.0) -> List[Tuple[HostDescriptor, bool]]:
    return [(h, ping_host(h, timeout=timeout)) for h in hosts]


def ping(hosts: Optional[List[HostDescriptor]] = None) -> bool:
    if hosts is None:
        try:
            hosts = parse_hosts(settings.hosts_json)
        except ValueError:
            return False
    return any(ok for _, ok in ping_hosts(hosts))
