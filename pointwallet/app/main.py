from __future__ import annotations

import argparse

import uvicorn
from fastapi import FastAPI

from pointwallet import __version__
from pointwallet.api import register_routes
from pointwallet.app.container import AppContainer, build_container
from pointwallet.app.logging import configure_logging
from pointwallet.app.settings import Settings, load_settings
from pointwallet.errors import install_exception_handlers


def create_app(settings: Settings | None = None, container: AppContainer | None = None) -> FastAPI:
    resolved_settings = settings or load_settings()
    configure_logging(debug=resolved_settings.debug)
    resolved_container = container or build_container(resolved_settings)

    app = FastAPI(title="Point Wallet API", version=__version__)
    app.state.container = resolved_container

    install_exception_handlers(app)
    register_routes(app)

    return app


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the point wallet service")
    parser.add_argument("--host", default=None, help="Bind host. Defaults to POINTWALLET_HOST or 127.0.0.1")
    parser.add_argument("--port", type=int, default=None, help="Bind port. Defaults to POINTWALLET_PORT or 8080")
    return parser


def main():
    args = _build_arg_parser().parse_args()
    settings = load_settings()
    host = args.host or settings.host
    port = args.port or settings.port
    uvicorn.run(create_app(settings), host=host, port=port, log_level="debug" if settings.debug else "info")


if __name__ == "__main__":
    main()
