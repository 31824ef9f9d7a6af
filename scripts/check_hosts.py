from __future__ import annotations

import os
import sys

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from morocco.schemas import parse_hosts
from morocco.services.hosts import ping_hosts
from morocco.settings import settings


def main():
    hosts = parse_hosts(settings.hosts_json)
    for host, ok in ping_hosts(hosts):
        state = "up" if ok else "DOWN"
        print(f"{host.protocol}://{host.url} accept={host.accept}: {state}")


if __name__ == "__main__":
    main()
