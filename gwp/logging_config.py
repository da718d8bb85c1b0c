# gwp/logging_config.py
import logging

from gwp.config import Config


def configure_logging(level_name: str = Config.LOG_LEVEL) -> None:
    """Simple root logging setup."""
    log_level = getattr(logging, level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Logging configured, level=%s", level_name)
