"""Run the service: ``python -m loan_gateway``."""

import sys

import structlog
import uvicorn
from pydantic import ValidationError

from loan_gateway.core.config import get_settings
from loan_gateway.core.logging import setup_logging


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        setup_logging()
        missing = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
        structlog.get_logger(__name__).error("invalid_configuration", fields=missing)
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        "loan_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
