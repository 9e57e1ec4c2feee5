"""Post-migration troubleshooting effort.

Every migrated VM needs some hands-on verification once it lands on the
target cluster. The work is spread across a team of engineers and reported
both as elapsed time and as whole work days.
"""
import math
from typing import Dict, List

from migration_planner.estimation.models import (
    Calculator,
    Estimation,
    Param,
    ParameterRangeError,
)
from migration_planner.estimation.params import (
    PARAM_POST_MIGRATION_ENGINEERS,
    PARAM_TROUBLESHOOT_MINS_PER_VM,
    PARAM_VM_COUNT,
    get_float,
    get_int,
    optional_float,
    optional_int,
    require,
    to_duration,
)

DEFAULT_TROUBLESHOOT_MINS_PER_VM = 60.0
DEFAULT_ENGINEER_COUNT = 10
DEFAULT_WORK_HOURS_PER_DAY = 8.0


class PostMigrationTroubleshooting(Calculator):
    """Estimates troubleshooting time after VMs are migrated."""

    def __init__(
        self,
        troubleshoot_mins_per_vm: float = DEFAULT_TROUBLESHOOT_MINS_PER_VM,
        engineer_count: int = DEFAULT_ENGINEER_COUNT,
        work_hours_per_day: float = DEFAULT_WORK_HOURS_PER_DAY,
    ):
        # engineer_count and work_hours_per_day are validated in calculate()
        self._troubleshoot_mins_per_vm = troubleshoot_mins_per_vm
        self._engineer_count = engineer_count
        self._work_hours_per_day = work_hours_per_day

    @property
    def troubleshoot_mins_per_vm(self) -> float:
        return self._troubleshoot_mins_per_vm

    @property
    def engineer_count(self) -> int:
        return self._engineer_count

    @property
    def work_hours_per_day(self) -> float:
        return self._work_hours_per_day

    def name(self) -> str:
        return "Post-Migration Troubleshooting"

    def keys(self) -> List[str]:
        # troubleshoot_mins_per_vm and post_migration_engineers are optional
        return [PARAM_VM_COUNT]

    def calculate(self, params: Dict[str, Param]) -> Estimation:
        """
        Formula: vm_count * mins_per_vm / engineers, in minutes.
        Work days: ceil(minutes / (work_hours_per_day * 60)).
        """
        vm_count = get_float(require(params, PARAM_VM_COUNT))
        if vm_count < 0:
            raise ParameterRangeError(f"{PARAM_VM_COUNT} must be non-negative", key=PARAM_VM_COUNT)

        mins_per_vm = optional_float(params, PARAM_TROUBLESHOOT_MINS_PER_VM)
        if mins_per_vm is None:
            mins_per_vm = self._troubleshoot_mins_per_vm
        if mins_per_vm < 0:
            raise ParameterRangeError(
                f"{PARAM_TROUBLESHOOT_MINS_PER_VM} must be non-negative",
                key=PARAM_TROUBLESHOOT_MINS_PER_VM,
            )

        engineers = optional_int(params, PARAM_POST_MIGRATION_ENGINEERS)
        if engineers is None:
            engineers = get_int(Param(key=PARAM_POST_MIGRATION_ENGINEERS, value=self._engineer_count))
        if engineers <= 0:
            raise ParameterRangeError(
                f"engineer count must be positive, got {engineers}",
                key=PARAM_POST_MIGRATION_ENGINEERS,
            )

        if self._work_hours_per_day <= 0:
            raise ParameterRangeError(
                f"work hours per day must be positive, got {self._work_hours_per_day}",
                key="work_hours_per_day",
            )

        total_mins = vm_count * mins_per_vm
        real_time_mins = total_mins / engineers
        duration = to_duration(real_time_mins, PARAM_VM_COUNT)
        work_days = math.ceil(real_time_mins / (self._work_hours_per_day * 60))

        return Estimation(
            duration=duration,
            reason=(
                f"{vm_count:g} VMs x {mins_per_vm:g} min/VM / {engineers} engineers "
                f"= {real_time_mins:.0f} min ({work_days} work days at "
                f"{self._work_hours_per_day:g} h/day)"
            ),
        )
