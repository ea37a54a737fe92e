#!/usr/bin/env python3
"""Run the UNO game service under uvicorn."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from uno_engine.config import load_service_config
from uno_server.app import create_app


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve UNO games over HTTP.")
    parser.add_argument("--config", default=None, help="Optional JSON service config path.")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind.")
    parser.add_argument("--port", type=int, default=8080, help="Port to listen on.")
    parser.add_argument("--seed", type=int, default=None, help="Override the configured RNG seed.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = load_service_config(args.config)
    if args.seed is not None:
        config = config.model_copy(update={"seed": args.seed})
    logging.basicConfig(level=config.logging_level())
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
