# -*- coding: utf-8 -*-
"""Console entry point: serve the API with uvicorn."""

from __future__ import annotations

import logging
import os

import uvicorn

from .api import create_app
from .config import Settings


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("ALAGAPP_LOG_LEVEL") or "INFO",
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    host = os.environ.get("ALAGAPP_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("ALAGAPP_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        port = 8000

    uvicorn.run(create_app(Settings()), host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
