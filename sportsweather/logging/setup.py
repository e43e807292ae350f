import sys
import logging
from typing import Any, Callable

from loguru import logger

from sportsweather.config.settings import AppSettings

SENSITIVE_KEYS = ["key", "token", "password", "secret"]


def _mask(value: str) -> str:
    if len(value) > 8:
        return value[:4] + "****" + value[-4:]
    return "********"


def make_sensitive_data_filter(settings: AppSettings) -> Callable[[dict[str, Any]], bool]:
    """Builds a loguru filter that masks secrets in log records.

    httpx logs every request URL at INFO, and the weather URL carries the API
    key as the ``appid`` query parameter, so the configured key is replaced
    wherever it shows up in a message.
    """
    secrets = [s for s in (settings.openweather_api_key,) if s]

    def mask_value(value: Any, name: str = "") -> Any:
        if isinstance(value, str):
            if any(sk in name.lower() for sk in SENSITIVE_KEYS):
                return _mask(value)
            return value
        elif isinstance(value, dict):
            return {k: mask_value(v, str(k)) for k, v in value.items()}
        elif isinstance(value, list):
            return [mask_value(item, name) for item in value]
        return value

    def sensitive_data_filter(record: dict[str, Any]) -> bool:
        if "extra" in record and isinstance(record["extra"], dict):
            record["extra"] = mask_value(record["extra"])

        for secret in secrets:
            if secret in record["message"]:
                record["message"] = record["message"].replace(secret, _mask(secret))

        return True  # Keep the record after masking

    return sensitive_data_filter


class InterceptHandler(logging.Handler):
    """Routes standard logging records (uvicorn, httpx) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(settings: AppSettings) -> None:
    """Configures Loguru logger based on application settings."""
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=False,  # Locals in tracebacks would leak the API key
        filter=make_sensitive_data_filter(settings),
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    # uvicorn installs its own handlers; hand them over to loguru as well
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    logger.info(f"Logging initialized with level: {settings.log_level}")
