"""FastAPI server entry point for the Charify chat server."""

import uvicorn

from .config import get_settings


def main(reload: bool = False):
    """Run the FastAPI server."""
    settings = get_settings()

    uvicorn.run(
        "charify.app:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=reload,
        log_level="info"
    )


if __name__ == "__main__":
    main()
