from .paths import DOTENV_PATH, LOG_DIR, PROJECT_ROOT, STORAGE_DIR
from .logger import configure_logging, get_logger
from .settings import VisionSettings, load_settings

__all__ = [
    "PROJECT_ROOT",
    "STORAGE_DIR",
    "LOG_DIR",
    "DOTENV_PATH",
    "configure_logging",
    "get_logger",
    "VisionSettings",
    "load_settings",
]
