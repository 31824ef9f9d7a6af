from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..presets import resolve_demo_config
from ..schemas import DemoConfig, HostDescriptor
from ..settings import Settings, settings
from .algolia_backend import AlgoliaBackend
from .backend import IndexHandle, SearchBackend, SearchServiceError
from .search_service import OpenSearchBackend

log = logging.getLogger(__name__)

BACKENDS = {
    AlgoliaBackend.name: AlgoliaBackend,
    OpenSearchBackend.name: OpenSearchBackend,
}


@dataclass
class CallOutcome:
    ok: bool
    value: Any = None
    error: Optional[Dict[str, Any]] = None


@dataclass
class DemoOutcome:
    write: CallOutcome
    search: CallOutcome


def make_backend(name: str, app_id: str, api_key: str, timeout: int = 20) -> SearchBackend:
    try:
        cls = BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown search backend {name!r}, expected one of {sorted(BACKENDS)}") from None
    return cls(app_id, api_key, timeout=timeout)


def configure_client(
    app_id: str,
    api_key: str,
    hosts: Iterable[HostDescriptor],
    backend: str = "algolia",
    timeout: int = 20,
) -> SearchBackend:
    client = make_backend(backend, app_id, api_key, timeout=timeout)
    client.set_hosts(hosts)
    return client


def format_error(err: SearchServiceError) -> str:
    return json.dumps(err.to_dict(), indent=2, ensure_ascii=False)


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def write_records(index: IndexHandle, records: List[Dict[str, Any]], wait: bool = True) -> CallOutcome:
    log.info("Saving %d records to index %s (wait=%s)", len(records), index.name, wait)
    try:
        object_ids = index.save_records(records, wait=wait)
    except SearchServiceError as e:
        log.warning("Saving records to %s failed: %s", index.name, e)
        print(format_error(e))
        return CallOutcome(ok=False, error=e.to_dict())
    print(_dump(object_ids))
    return CallOutcome(ok=True, value=object_ids)


def search_index(index: IndexHandle, query: str) -> CallOutcome:
    log.info("Searching index %s for %r", index.name, query)
    try:
        hits = index.search(query)
    except SearchServiceError as e:
        log.warning("Search on %s failed: %s", index.name, e)
        print(format_error(e))
        return CallOutcome(ok=False, error=e.to_dict())
    print(_dump(hits))
    return CallOutcome(ok=True, value=hits)


def run_demo(
    config: DemoConfig,
    backend: str = "algolia",
    wait: bool = True,
    timeout: int = 20,
    client: Optional[SearchBackend] = None,
) -> DemoOutcome:
    """Seed ``config.records`` into the index, then run ``config.query``.

    With ``wait`` the search is only issued once the service reports the
    write as indexed. Without it the write is submitted and the search follows
    immediately, so it may not see the new records. A failed write never
    stops the search.
    """
    if client is None:
        client = make_backend(backend, config.application_id, config.api_key, timeout=timeout)
    client.set_hosts(config.hosts)
    index = client.init_index(config.index_name)
    try:
        write = write_records(index, config.records, wait=wait)
        search = search_index(index, config.query)
    finally:
        client.close()
    return DemoOutcome(write=write, search=search)


def run_preset(preset: str, cfg: Optional[Settings] = None) -> DemoOutcome:
    cfg = cfg or settings
    config = resolve_demo_config(preset, cfg)
    return run_demo(config, backend=cfg.backend, wait=cfg.wait_for_indexing, timeout=cfg.timeout)
