import os
from pathlib import Path
from typing import Any, Dict


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    return int(value) if value else default


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    return float(value) if value else default


def load_config() -> Dict[str, Any]:
    return {
        "max_concurrency": max(1, _env_int("ZIP_EXTRACT_MAX_CONCURRENCY", 8)),
        "http_timeout": _env_float("ZIP_EXTRACT_HTTP_TIMEOUT", 30.0),
        "output_dir": Path(os.environ.get("ZIP_EXTRACT_OUTPUT_DIR", "./extracted")),
        "host": os.environ.get("ZIP_EXTRACT_HOST", "0.0.0.0"),
        "port": _env_int("ZIP_EXTRACT_PORT", 7070),
    }


config = load_config()


def resolve_concurrency(max_concurrency: int | None) -> int:
    if max_concurrency is None:
        max_concurrency = config["max_concurrency"]
    return max(1, max_concurrency)
