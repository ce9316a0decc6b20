"""Run the API with uvicorn: ``python -m citygraph``."""

import uvicorn

from citygraph.config import settings


def main() -> None:
    """Start the uvicorn server on the configured host and port."""
    uvicorn.run(
        "citygraph.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
