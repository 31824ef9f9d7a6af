from __future__ import annotations

import json

import pytest

from morocco.presets import POEMAS_RECORDS, resolve_demo_config
from morocco.settings import DEFAULT_HOSTS, Settings


def _settings(**kw) -> Settings:
    base = dict(app_id="applicationId", api_key="apiKey", hosts_json=DEFAULT_HOSTS, demo_config_path=None)
    base.update(kw)
    return Settings(**base)


def test_poemas_preset_matches_literals():
    cfg = resolve_demo_config("poemas", _settings())
    assert cfg.application_id == "applicationId"
    assert cfg.api_key == "apiKey"
    assert cfg.index_name == "poemas"
    assert cfg.query == "fuera"
    assert cfg.records == POEMAS_RECORDS
    assert [(h.protocol, h.url, h.accept) for h in cfg.hosts] == [
        ("http", "localhost:3000", 1),
        ("http", "localhost:3000", 2),
    ]


def test_libros_preset_record_shape():
    cfg = resolve_demo_config("libros", _settings(app_id="other", api_key="secret"))
    assert cfg.index_name == "libros"
    assert cfg.application_id == "other"
    for rec in cfg.records:
        assert {"objectID", "name", "title", "summary"} <= set(rec)


def test_preset_records_are_copies():
    cfg = resolve_demo_config("poemas", _settings())
    cfg.records[0]["title"] = "changed"
    assert POEMAS_RECORDS[0]["title"] == "El foo de la fuera"


def test_unknown_preset():
    with pytest.raises(ValueError):
        resolve_demo_config("nope", _settings())


def test_config_file_replaces_preset(tmp_path):
    path = tmp_path / "demo.json"
    path.write_text(json.dumps({
        "applicationId": "file-app",
        "apiKey": "file-key",
        "hosts": [],
        "indexName": "custom",
        "records": [{"objectID": "a"}],
        "query": "x",
    }), encoding="utf-8")
    cfg = resolve_demo_config("poemas", _settings(demo_config_path=str(path)))
    assert cfg.index_name == "custom"
    assert cfg.application_id == "file-app"
    assert cfg.hosts == []
