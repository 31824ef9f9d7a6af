from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


def split_host_port(url: str) -> Tuple[str, Optional[int]]:
    """Split a ``host[:port]`` string. Raises ValueError when malformed."""
    if not url or "/" in url or " " in url:
        raise ValueError(f"Host url must look like host:port, got {url!r}")
    host, sep, port = url.rpartition(":")
    if not sep:
        return url, None
    if not host:
        raise ValueError(f"Host url is missing the host part: {url!r}")
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ValueError(f"Host url has an invalid port: {url!r}")
    return host, int(port)


class HostDescriptor(BaseModel):
    protocol: str = Field(default="https", description="http or https")
    url: str = Field(description="host:port")
    accept: int = Field(default=3, ge=1, le=3, description="Call types this host serves (1 read, 2 write, 3 both)")

    @field_validator("protocol")
    @classmethod
    def _known_protocol(cls, v: str) -> str:
        v = v.lower()
        if v not in ("http", "https"):
            raise ValueError(f"Unsupported protocol: {v}")
        return v

    @field_validator("url")
    @classmethod
    def _well_formed_url(cls, v: str) -> str:
        split_host_port(v)
        return v

    @property
    def host(self) -> str:
        return split_host_port(self.url)[0]

    @property
    def port(self) -> Optional[int]:
        return split_host_port(self.url)[1]


class DemoConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    application_id: str = Field(alias="applicationId", min_length=1)
    api_key: str = Field(alias="apiKey", min_length=1)
    hosts: List[HostDescriptor] = Field(default_factory=list)
    index_name: str = Field(alias="indexName", min_length=1)
    records: List[Dict[str, Any]] = Field(default_factory=list)
    query: str = ""

    @field_validator("records")
    @classmethod
    def _records_have_object_id(cls, v: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        # Only presence is checked; the service owns identity.
        for i, rec in enumerate(v):
            if rec.get("objectID") is None:
                raise ValueError(f"Record #{i} has no objectID")
        return v


def parse_hosts(raw: str) -> List[HostDescriptor]:
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("Host list must be a JSON array of host descriptors")
    return [HostDescriptor.model_validate(h) for h in data]


def load_demo_config(path: str | Path) -> DemoConfig:
    return DemoConfig.model_validate_json(Path(path).read_text(encoding="utf-8"))
