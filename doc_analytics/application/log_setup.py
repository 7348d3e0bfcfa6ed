# doc_analytics/application/log_setup.py
import sys
from loguru import logger
from doc_analytics.application.settings import Settings, get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def resolve_level(settings: Settings) -> str:
    # explicit LOG_LEVEL wins over the debug switch
    if settings.log_level:
        return settings.log_level.upper()
    return "DEBUG" if settings.debug else "INFO"


def setup_logging(settings: Settings | None = None) -> None:
    """Route all service logs to a single stdout sink."""
    settings = settings or get_settings()
    level = resolve_level(settings)

    logger.remove()  # drop loguru's default stderr sink, also on reload
    logger.add(sys.stdout, level=level, format=LOG_FORMAT, backtrace=False, diagnose=False)
    logger.debug("Logging ready: level={} env='{}'", level, settings.app_env)
