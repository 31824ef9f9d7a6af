from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from morocco.schemas import DemoConfig, HostDescriptor, load_demo_config, parse_hosts, split_host_port


def test_split_host_port():
    assert split_host_port("localhost:3000") == ("localhost", 3000)
    assert split_host_port("search.example.org") == ("search.example.org", None)


@pytest.mark.parametrize("url", ["", ":3000", "localhost:abc", "localhost:70000", "http://localhost:3000"])
def test_split_host_port_rejects_malformed(url):
    with pytest.raises(ValueError):
        split_host_port(url)


def test_host_descriptor_fields():
    h = HostDescriptor(protocol="HTTP", url="localhost:3000", accept=2)
    assert h.protocol == "http"
    assert h.host == "localhost"
    assert h.port == 3000
    assert h.accept == 2


def test_host_descriptor_validation():
    with pytest.raises(ValidationError):
        HostDescriptor(protocol="ftp", url="localhost:3000", accept=1)
    with pytest.raises(ValidationError):
        HostDescriptor(protocol="http", url="localhost:3000", accept=7)
    with pytest.raises(ValidationError):
        HostDescriptor(protocol="http", url="local host", accept=1)


def test_parse_hosts_keeps_order_and_duplicates():
    raw = json.dumps([
        {"protocol": "http", "url": "localhost:3000", "accept": 1},
        {"protocol": "http", "url": "localhost:3000", "accept": 2},
    ])
    hosts = parse_hosts(raw)
    assert [h.accept for h in hosts] == [1, 2]
    assert {h.url for h in hosts} == {"localhost:3000"}


def test_parse_hosts_requires_list():
    with pytest.raises(ValueError):
        parse_hosts('{"protocol": "http", "url": "localhost:3000"}')


def test_demo_config_accepts_camel_case(tmp_path):
    path = tmp_path / "demo.json"
    path.write_text(json.dumps({
        "applicationId": "app",
        "apiKey": "key",
        "hosts": [{"protocol": "http", "url": "localhost:3000", "accept": 1}],
        "indexName": "poemas",
        "records": [{"objectID": 1, "title": "El foo de la fuera"}],
        "query": "fuera",
    }), encoding="utf-8")
    cfg = load_demo_config(path)
    assert cfg.application_id == "app"
    assert cfg.api_key == "key"
    assert cfg.index_name == "poemas"
    assert cfg.records[0]["objectID"] == 1
    assert cfg.hosts[0].port == 3000


def test_demo_config_requires_object_id():
    with pytest.raises(ValidationError):
        DemoConfig(application_id="app", api_key="key", index_name="poemas", records=[{"title": "sin id"}])
