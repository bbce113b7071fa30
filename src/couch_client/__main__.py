"""Example program: append an entry to a named list document."""

from __future__ import annotations

import logging
import sys

from couch_client.client import CouchClient
from couch_client.config import load_settings
from couch_client.errors import CouchError
from couch_client.health import check_server
from couch_client.logging import configure_logging
from couch_client.models import NamedList

logger = logging.getLogger(__name__)

_DEFAULT_NAME = "xds"
_DEFAULT_ENTRY = "ha"


def run(name: str = _DEFAULT_NAME, entry: str = _DEFAULT_ENTRY) -> int:
    """Fetch a list by its derived id, append ``entry`` and write it back."""
    settings = load_settings()
    configure_logging(settings.app.log_level)

    if not check_server(settings.couch):
        return 1

    with CouchClient(settings.couch) as client:
        try:
            named_list = client.get_object(NamedList(name=name).derive_id(), NamedList)
            logger.info("Fetched %s", named_list)
            named_list.fields.append(entry)
            res = client.update_object(named_list, dict)
        except CouchError as exc:
            logger.error("%s", exc)  # noqa: TRY400
            return 1

    logger.info("Server replied %s", res)
    return 0


def main() -> None:
    """Entry point for ``python -m couch_client``."""
    args = sys.argv[1:]
    sys.exit(run(*args[:2]))


if __name__ == "__main__":
    main()
