"""
Migration time estimation: parameter registry, calculator contract and the
stage calculators.
"""

from migration_planner.estimation.models import (
    Calculator,
    Estimation,
    EstimationError,
    MissingParameterError,
    Param,
    ParameterRangeError,
    ParameterTypeError,
)
from migration_planner.estimation.params import (
    PARAM_POST_MIGRATION_ENGINEERS,
    PARAM_TOTAL_DISK_GB,
    PARAM_TRANSFER_RATE_MBPS,
    PARAM_TROUBLESHOOT_MINS_PER_VM,
    PARAM_VM_COUNT,
    build_params,
    get_float,
    get_int,
)
from migration_planner.estimation.calculators import (
    PostMigrationTroubleshooting,
    StorageMigration,
)

__all__ = [
    "Calculator",
    "Estimation",
    "EstimationError",
    "MissingParameterError",
    "Param",
    "ParameterRangeError",
    "ParameterTypeError",
    "PARAM_VM_COUNT",
    "PARAM_TROUBLESHOOT_MINS_PER_VM",
    "PARAM_POST_MIGRATION_ENGINEERS",
    "PARAM_TOTAL_DISK_GB",
    "PARAM_TRANSFER_RATE_MBPS",
    "build_params",
    "get_float",
    "get_int",
    "PostMigrationTroubleshooting",
    "StorageMigration",
]
