from __future__ import annotations
import json
import logging
from pathlib import Path
import httpx
from knack_openapi.core.config import settings
from knack_openapi.schemas.knack import KnackSchema

log = logging.getLogger(__name__)


class SchemaFetchError(Exception):
    """The input schema could not be fetched or parsed."""


def is_remote_source(schema_source: str) -> bool:
    return schema_source.startswith("http://") or schema_source.startswith("https://")


def _fetch_remote(url: str, timeout: float) -> dict:
    log.info("Fetching schema from remote URL: %s", url)
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        r = client.get(url)
        r.raise_for_status()
        return r.json()


def _read_local(path: str) -> dict:
    resolved = Path(path).resolve()
    log.info("Reading schema from local file: %s", resolved)
    return json.loads(resolved.read_text(encoding="utf-8"))


def fetch_schema(schema_source: str, timeout: float | None = None) -> KnackSchema:
    """Load a Knack application schema from a local path or an HTTP(S) URL."""
    try:
        if is_remote_source(schema_source):
            data = _fetch_remote(schema_source, timeout or settings.http_timeout)
        else:
            data = _read_local(schema_source)
        return KnackSchema.model_validate(data)
    except Exception as e:
        raise SchemaFetchError(f"Failed to fetch schema from {schema_source}: {e}") from e
