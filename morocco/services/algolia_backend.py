from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from algoliasearch.http.hosts import Host, HostsCollection
from algoliasearch.search.client import SearchClientSync
from algoliasearch.search.config import SearchConfig

from ..schemas import HostDescriptor
from .backend import SearchBackend, SearchServiceError

log = logging.getLogger(__name__)


def to_transport_host(h: HostDescriptor) -> Host:
    # accept is the transport's call-type mask (1 read, 2 write)
    return Host(h.host, scheme=h.protocol, port=h.port, accept=h.accept)


class AlgoliaBackend(SearchBackend):
    name = "algolia"

    def __init__(self, app_id: str, api_key: str, timeout: int = 20) -> None:
        super().__init__(app_id, api_key, timeout=timeout)
        self._config = SearchConfig(app_id, api_key)
        self._config.read_timeout = timeout * 1000
        self._config.write_timeout = timeout * 1000
        self._transport_hosts: List[Host] = []
        self._client: Optional[SearchClientSync] = None

    @property
    def transport_hosts(self) -> List[Host]:
        """Hosts applied by ``set_hosts``; empty while the library defaults are in use."""
        return list(self._transport_hosts)

    def set_hosts(self, hosts: Iterable[HostDescriptor]) -> None:
        super().set_hosts(hosts)
        self._transport_hosts = [to_transport_host(h) for h in self.hosts]
        self._config.hosts = HostsCollection(self._transport_hosts)
        log.info(
            "Search hosts set: %s",
            ", ".join(f"{h.protocol}://{h.url} (accept={h.accept})" for h in self.hosts),
        )

    def get_client(self) -> SearchClientSync:
        if self._client is None:
            self._client = SearchClientSync.create_with_config(config=self._config)
        return self._client

    def save_records(self, index_name: str, records: List[Dict[str, Any]], wait: bool = True) -> List[Any]:
        log.debug("save_objects index=%s n=%d wait=%s", index_name, len(records), wait)
        try:
            responses = self.get_client().save_objects(
                index_name=index_name,
                objects=records,
                wait_for_tasks=wait,
            )
            return [oid for r in responses for oid in (r.object_ids or [])]
        except Exception as e:
            # AlgoliaException, undecodable bodies, exhausted task polling
            raise SearchServiceError.from_exception(e) from e

    def search(self, index_name: str, query: str) -> List[Dict[str, Any]]:
        log.debug("search index=%s query=%r", index_name, query)
        try:
            resp = self.get_client().search_single_index(
                index_name=index_name,
                search_params={"query": query},
            )
            return [hit.to_dict() for hit in resp.hits or []]
        except Exception as e:
            raise SearchServiceError.from_exception(e) from e

    def _reset(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None
