from __future__ import annotations

import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

# Load variables from .env.example first (as defaults), then .env to override
project_root = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=project_root / ".env.example", override=False)
load_dotenv(dotenv_path=project_root / ".env", override=True)

DEFAULT_HOSTS = (
    '[{"protocol": "http", "url": "localhost:3000", "accept": 1},'
    ' {"protocol": "http", "url": "localhost:3000", "accept": 2}]'
)


def _getenv(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key, default)
    return v


def _getbool(key: str, default: bool) -> bool:
    v = _getenv(key)
    if v is None or v == "":
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    app_env: str = _getenv("APP_ENV", "development") or "development"
    log_level: str = _getenv("LOG_LEVEL", "INFO") or "INFO"

    # Search service
    backend: str = _getenv("SEARCH_BACKEND", "algolia") or "algolia"
    app_id: str = _getenv("SEARCH_APP_ID", "applicationId") or "applicationId"
    api_key: str = _getenv("SEARCH_API_KEY", "apiKey") or "apiKey"
    hosts_json: str = _getenv("SEARCH_HOSTS", DEFAULT_HOSTS) or DEFAULT_HOSTS
    timeout: int = int(_getenv("SEARCH_TIMEOUT", "20") or 20)

    # Demo run
    wait_for_indexing: bool = _getbool("WAIT_FOR_INDEXING", True)
    demo_config_path: str | None = _getenv("DEMO_CONFIG_PATH")


settings = Settings()
