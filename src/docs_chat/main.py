"""Entrypoint: run the docs chat server."""

import uvicorn

from docs_chat.api.app import create_app
from docs_chat.config.settings import Settings


def main() -> None:
    settings = Settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
