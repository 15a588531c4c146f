"""Run the error collection endpoint."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from error_logger.api import create_collector_app
from error_logger.logging_config import setup_logging


def main():
    """Run the collector."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    setup_logging()

    # Get configuration from environment
    host = os.getenv("COLLECTOR_HOST", "localhost")
    port = int(os.getenv("COLLECTOR_PORT", "8000"))

    app = create_collector_app()

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
