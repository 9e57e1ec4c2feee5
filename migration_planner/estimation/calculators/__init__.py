"""
Migration stage calculators.
"""

from .post_migration import (
    DEFAULT_ENGINEER_COUNT,
    DEFAULT_TROUBLESHOOT_MINS_PER_VM,
    DEFAULT_WORK_HOURS_PER_DAY,
    PostMigrationTroubleshooting,
)
from .storage_migration import DEFAULT_TRANSFER_RATE_MBPS, StorageMigration

__all__ = [
    "PostMigrationTroubleshooting",
    "StorageMigration",
    "DEFAULT_TROUBLESHOOT_MINS_PER_VM",
    "DEFAULT_ENGINEER_COUNT",
    "DEFAULT_WORK_HOURS_PER_DAY",
    "DEFAULT_TRANSFER_RATE_MBPS",
]
