#!/usr/bin/env python
"""
Jungle King development server launcher
"""

import argparse

import uvicorn

from jungle_king.config import ServerConfig
from jungle_king.logging_setup import setup_logging


def main():
    config = ServerConfig.from_env()

    parser = argparse.ArgumentParser(description="Jungle King API server")
    parser.add_argument("--host", default=config.host, help="Bind address")
    parser.add_argument("--port", type=int, default=config.port, help="Port")
    parser.add_argument("--log-level", default=config.log_level, help="debug, info, warning, ...")
    args = parser.parse_args()

    setup_logging(args.log_level)

    print("=" * 60)
    print("Starting the Jungle King development server")
    print("=" * 60)
    print(f"API server: http://{args.host}:{args.port}")
    print(f"API docs:   http://{args.host}:{args.port}/docs")
    print("=" * 60)
    print()

    from jungle_king.api.main import app

    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        reload=False,
        log_level=args.log_level
    )


if __name__ == "__main__":
    main()
