from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..schemas import HostDescriptor


class SearchServiceError(Exception):
    """A failed call to the search service, in a printable shape."""

    def __init__(self, message: str, name: str = "SearchServiceError", status: Optional[int] = None) -> None:
        super().__init__(message)
        self.name = name
        self.message = message
        self.status = status

    @classmethod
    def from_exception(cls, exc: BaseException) -> "SearchServiceError":
        status = getattr(exc, "status_code", None)
        if not isinstance(status, int):
            # opensearch-py reports "N/A" for connection failures
            status = None
        return cls(str(exc) or repr(exc), name=type(exc).__name__, status=status)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "message": self.message, "status": self.status}


class SearchBackend:
    """Client handle: two credentials plus a replaceable host list.

    Subclasses wrap a concrete search library and implement ``save_records``
    and ``search``. Transport, retries and failover stay inside that library.
    """

    name = "base"

    def __init__(self, app_id: str, api_key: str, timeout: int = 20) -> None:
        self.app_id = app_id
        self.api_key = api_key
        self.timeout = timeout
        self.hosts: List[HostDescriptor] = []

    def set_hosts(self, hosts: Iterable[HostDescriptor]) -> None:
        self.hosts = list(hosts)
        self._reset()

    def init_index(self, index_name: str) -> "IndexHandle":
        return IndexHandle(backend=self, name=index_name)

    def save_records(self, index_name: str, records: List[Dict[str, Any]], wait: bool = True) -> List[Any]:
        raise NotImplementedError

    def search(self, index_name: str, query: str) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def close(self) -> None:
        self._reset()

    def _reset(self) -> None:
        pass


@dataclass(frozen=True)
class IndexHandle:
    backend: SearchBackend
    name: str

    def save_records(self, records: List[Dict[str, Any]], wait: bool = True) -> List[Any]:
        return self.backend.save_records(self.name, records, wait=wait)

    def search(self, query: str) -> List[Dict[str, Any]]:
        return self.backend.search(self.name, query)
