"""Pre-flight check that the database server is reachable."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from couch_client.transport import redact

if TYPE_CHECKING:
    from couch_client.config import CouchConfig

logger = logging.getLogger(__name__)

_WELCOME_KEY = "couchdb"


def check_server(config: CouchConfig, *, client: httpx.Client | None = None) -> bool:
    """Verify the server answers its welcome document. Return False if it does not."""
    url = f"{config.base_url}/"
    http = client or httpx.Client(timeout=3)
    try:
        response = http.get(url)
        payload = response.json()
    except httpx.HTTPError:
        logger.error("CouchDB is not reachable at %s", redact(config.base_url))
        return False
    except ValueError:
        logger.error("Server at %s did not answer with JSON", redact(config.base_url))
        return False
    finally:
        if client is None:
            http.close()

    if not isinstance(payload, dict) or _WELCOME_KEY not in payload:
        logger.error("Server at %s is not a CouchDB instance", redact(config.base_url))
        return False
    logger.info("Connected to CouchDB %s", payload.get("version", "unknown"))
    return True
