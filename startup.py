#!/usr/bin/env python3
"""Startup script for container deployment - reads PORT from environment."""
import logging
import os
import sys


def main():
    # Ensure current directory is in Python path
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

    import uvicorn

    from bmi_tracker.config import settings
    from bmi_tracker.main import app as fastapi_app

    logging.getLogger(__name__).info("Server running on port %s", settings.PORT)
    uvicorn.run(fastapi_app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
