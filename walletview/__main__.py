import logging

import uvicorn

from walletview.core.config import get_settings
from walletview.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info("Starting %s on %s:%d", settings.project_name, settings.host, settings.port)
    uvicorn.run(
        "walletview.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
