"""Storage migration transfer time.

Estimates how long it takes to copy all VM disks from the source to the
target cluster at a sustained network rate.
"""
from typing import Dict, List

from migration_planner.estimation.models import (
    Calculator,
    Estimation,
    Param,
    ParameterRangeError,
)
from migration_planner.estimation.params import (
    PARAM_TOTAL_DISK_GB,
    PARAM_TRANSFER_RATE_MBPS,
    get_float,
    optional_float,
    require,
    to_duration,
)

# 620 Mbps is ~77.5 MB/s, which reproduces the 110 min / 500 GB baseline
DEFAULT_TRANSFER_RATE_MBPS = 620.0


class StorageMigration(Calculator):
    """Estimates disk transfer time from total size and transfer rate."""

    def __init__(self, transfer_rate_mbps: float = DEFAULT_TRANSFER_RATE_MBPS):
        # Non-positive rates are ignored and the default is kept
        self._transfer_rate_mbps = (
            transfer_rate_mbps if transfer_rate_mbps > 0 else DEFAULT_TRANSFER_RATE_MBPS
        )

    @property
    def transfer_rate_mbps(self) -> float:
        return self._transfer_rate_mbps

    def name(self) -> str:
        return "Storage Migration"

    def keys(self) -> List[str]:
        return [PARAM_TOTAL_DISK_GB]

    def calculate(self, params: Dict[str, Param]) -> Estimation:
        """Formula: (total_disk_gb * 1024) / (transfer_rate_mbps / 8) / 60"""
        total_gb = get_float(require(params, PARAM_TOTAL_DISK_GB))
        if total_gb < 0:
            raise ParameterRangeError(f"{PARAM_TOTAL_DISK_GB} must be non-negative", key=PARAM_TOTAL_DISK_GB)

        transfer_rate_mbps = self._transfer_rate_mbps
        # Type-checked even when the value ends up being ignored
        param_rate = optional_float(params, PARAM_TRANSFER_RATE_MBPS)
        if param_rate is not None and param_rate > 0:
            transfer_rate_mbps = param_rate

        transfer_rate_mbytes = transfer_rate_mbps / 8
        total_mins = (total_gb * 1024) / transfer_rate_mbytes / 60
        mins_per_500gb = (500.0 * 1024.0) / transfer_rate_mbytes / 60.0

        return Estimation(
            duration=to_duration(total_mins, PARAM_TOTAL_DISK_GB),
            reason=f"{total_gb:.2f} GB at {transfer_rate_mbps:.0f} Mbps ({mins_per_500gb:.0f} min/500GB)",
        )
