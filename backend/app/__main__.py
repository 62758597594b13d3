"""Run the contact form API with uvicorn.

Host, port and log level come from ``HOST``, ``PORT`` and ``LOG_LEVEL``.
``MONGO_URI`` must be set; without it the process exits before serving::

    MONGO_URI=mongodb://localhost:27017/contactform python -m app
"""
import logging
import sys

import uvicorn

from app.core.errors import StartupError
from app.core.settings import require_mongo_uri, settings
from app.main import create_app

log = logging.getLogger("uvicorn.error")


def main() -> None:
    try:
        require_mongo_uri(settings)
    except StartupError as exc:
        logging.basicConfig(level=logging.ERROR)
        log.error(f"[main] {exc}")
        sys.exit(1)

    log.info(f"[main] starting on http://{settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
