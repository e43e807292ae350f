import sys

import uvicorn
from loguru import logger
from rich import print
from rich.panel import Panel

from sportsweather.config.settings import AppSettings, load_settings
from sportsweather.logging.setup import setup_logging
from sportsweather.api.app import create_app


def print_banner(settings: AppSettings) -> None:
    base = f"http://localhost:{settings.port}"
    print(
        Panel(
            f"Server running on port {settings.port}\n"
            f"MLB Standings: {base}/standings/al\n"
            f"Weather: {base}/weather/New%20York",
            title="Sports & Weather API",
        )
    )


def main() -> None:
    """Main entry point for the application."""
    settings = load_settings()
    setup_logging(settings)

    app = create_app(settings)
    print_banner(settings)

    # log_config=None keeps uvicorn from replacing the loguru intercept
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
