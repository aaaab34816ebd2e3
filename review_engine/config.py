import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_ANALYSIS_DELAY_SEC = 0.8
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_analysis_delay() -> float:
    """Seconds the session waits before delivering results (cosmetic)."""
    raw = os.getenv("REVIEW_ANALYSIS_DELAY_SEC")
    if raw is None or not raw.strip():
        return DEFAULT_ANALYSIS_DELAY_SEC
    try:
        return max(float(raw), 0.0)
    except ValueError:
        logger.warning("Invalid REVIEW_ANALYSIS_DELAY_SEC=%r; using %s", raw, DEFAULT_ANALYSIS_DELAY_SEC)
        return DEFAULT_ANALYSIS_DELAY_SEC


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").strip().upper()


def setup_logging() -> None:
    level = get_log_level()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    logging.basicConfig(level=level, format=LOG_FORMAT)
