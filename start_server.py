"""Startup script for container / PaaS deployment."""
import logging

import uvicorn

from earning_templates import config
from earning_templates.core.logging import resolve_level


def uvicorn_options() -> dict:
    return {
        "host": config.HOST,
        "port": config.PORT,
        "log_level": logging.getLevelName(resolve_level()).lower(),
    }


def main() -> None:
    options = uvicorn_options()
    print(f"Starting uvicorn on {options['host']}:{options['port']}", flush=True)
    uvicorn.run("earning_templates.app:app", **options)


if __name__ == "__main__":
    main()
