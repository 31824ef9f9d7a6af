from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from opensearchpy import OpenSearch, helpers

from .backend import SearchBackend, SearchServiceError

log = logging.getLogger(__name__)

DEFAULT_HOSTS = [{"host": "localhost", "port": 9200}]


class OpenSearchBackend(SearchBackend):
    """Same seed-and-search operations on an OpenSearch cluster.

    The accept tag of a host descriptor is ignored: this transport has no
    read/write split and round-robins across all hosts.
    """

    name = "opensearch"

    def __init__(self, app_id: str, api_key: str, timeout: int = 20) -> None:
        super().__init__(app_id, api_key, timeout=timeout)
        self._client: Optional[OpenSearch] = None

    @property
    def transport_hosts(self) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        for h in self.hosts:
            port = h.port or (443 if h.protocol == "https" else 80)
            out.append({"host": h.host, "port": port, "scheme": h.protocol})
        return out or list(DEFAULT_HOSTS)

    def get_client(self) -> OpenSearch:
        if self._client is not None:
            return self._client

        self._client = OpenSearch(
            hosts=self.transport_hosts,
            http_compress=True,
            http_auth=(self.app_id, self.api_key),
            verify_certs=False,
            ssl_assert_hostname=False,
            ssl_show_warn=False,
            timeout=self.timeout,
        )
        return self._client

    def ensure_index(self, index_name: str) -> None:
        client = self.get_client()
        if client.indices.exists(index=index_name):
            return
        body = {"settings": {"index": {"number_of_shards": 1, "number_of_replicas": 0}}}
        client.indices.create(index=index_name, body=body)

    def save_records(self, index_name: str, records: List[Dict[str, Any]], wait: bool = True) -> List[Any]:
        def gen_actions():
            for r in records:
                yield {
                    "_op_type": "index",
                    "_index": index_name,
                    "_id": str(r["objectID"]),
                    "_source": r,
                }

        try:
            self.ensure_index(index_name)
            client = self.get_client()
            success, errors = helpers.bulk(client, gen_actions(), stats_only=False, raise_on_error=False)
            if errors:
                raise SearchServiceError(
                    f"{len(errors)} of {len(records)} records failed: {errors[0]}",
                    name="BulkIndexError",
                )
            if wait:
                # Make the records visible to the search that follows
                client.indices.refresh(index=index_name)
        except SearchServiceError:
            raise
        except Exception as e:
            # OpenSearchException, serializer and bulk helper errors
            raise SearchServiceError.from_exception(e) from e
        log.debug("bulk index=%s success=%s", index_name, success)
        return [r["objectID"] for r in records]

    def search(self, index_name: str, query: str) -> List[Dict[str, Any]]:
        body = {"query": {"query_string": {"query": query}}}
        hits_out: List[Dict[str, Any]] = []
        try:
            resp = self.get_client().search(index=index_name, body=body)
            for h in resp.get("hits", {}).get("hits", []):
                src = dict(h.get("_source", {}))
                src.setdefault("objectID", h.get("_id"))
                hits_out.append(src)
        except Exception as e:
            raise SearchServiceError.from_exception(e) from e
        return hits_out

    def _reset(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None
