"""Utils package initialization"""

from migration_planner.utils.config import config
from migration_planner.utils.logger import logger, setup_logger

__all__ = [
    "config",
    "logger",
    "setup_logger",
]
