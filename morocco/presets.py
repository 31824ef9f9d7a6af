from __future__ import annotations

from typing import Any, Dict, List

from .schemas import DemoConfig, load_demo_config, parse_hosts
from .settings import Settings, settings


POEMAS_RECORDS: List[Dict[str, Any]] = [
    {
        "objectID": 1,
        "title": "El foo de la fuera",
        "body": "El fuero de la fuera fueron fuerar con pontito...",
    },
]

LIBROS_RECORDS: List[Dict[str, Any]] = [
    {
        "objectID": 1,
        "name": "fuera-del-fuero",
        "title": "El foo de la fuera",
        "summary": "Cuentos del fuero de la fuera, con pontito.",
    },
    {
        "objectID": 2,
        "name": "bar-del-baz",
        "title": "El bar del baz",
        "summary": "Un libro que no habla de nada en particular.",
    },
]

PRESETS: Dict[str, Dict[str, Any]] = {
    "poemas": {"index_name": "poemas", "records": POEMAS_RECORDS, "query": "fuera"},
    "libros": {"index_name": "libros", "records": LIBROS_RECORDS, "query": "fuera"},
}


def resolve_demo_config(preset: str, cfg: Settings | None = None) -> DemoConfig:
    """Build the demo configuration for a preset.

    A JSON file at ``DEMO_CONFIG_PATH`` replaces the preset entirely. Otherwise
    the preset's index, records and query are combined with the credentials and
    host list from settings.
    """
    cfg = cfg or settings
    if cfg.demo_config_path:
        return load_demo_config(cfg.demo_config_path)

    if preset not in PRESETS:
        raise ValueError(f"Unknown preset {preset!r}, expected one of {sorted(PRESETS)}")
    base = PRESETS[preset]
    return DemoConfig(
        application_id=cfg.app_id,
        api_key=cfg.api_key,
        hosts=parse_hosts(cfg.hosts_json),
        index_name=base["index_name"],
        records=[dict(r) for r in base["records"]],
        query=base["query"],
    )
