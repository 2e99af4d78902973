from .paths import LOG_DIR, PROJECT_ROOT, SCENARIO_STORAGE_DIR, STORAGE_DIR
from .logger import configure_logging, get_logger

__all__ = [
    "PROJECT_ROOT",
    "STORAGE_DIR",
    "SCENARIO_STORAGE_DIR",
    "LOG_DIR",
    "configure_logging",
    "get_logger",
]
