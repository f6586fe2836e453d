# moviestore/__main__.py

import uvicorn

from moviestore.core.config import get_settings
from moviestore.main import app, logger


def main() -> None:
    settings = get_settings()
    port = settings.listen_port
    logger.info("server listening on port http://localhost:%d", port)
    uvicorn.run(app, host=settings.host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
