"""
Parameter registry helpers.

All numeric coercion happens here, so these functions are the only place a
ParameterTypeError can originate.
"""

import math
import numbers
from decimal import Decimal
from datetime import timedelta
from typing import Any, Dict, Optional

from migration_planner.estimation.models import (
    MissingParameterError,
    Param,
    ParameterRangeError,
    ParameterTypeError,
)

# ── Recognised parameter keys ────────────────────────────────────────────────
PARAM_VM_COUNT = "vm_count"
PARAM_TROUBLESHOOT_MINS_PER_VM = "troubleshoot_mins_per_vm"
PARAM_POST_MIGRATION_ENGINEERS = "post_migration_engineers"
PARAM_TOTAL_DISK_GB = "total_disk_gb"
PARAM_TRANSFER_RATE_MBPS = "transfer_rate_mbps"


def build_params(values: Dict[str, Any]) -> Dict[str, Param]:
    """Wrap a plain ``{key: value}`` mapping into a parameter registry."""
    return {key: Param(key=key, value=value) for key, value in values.items()}


def get_float(param: Param) -> float:
    """Read a param as a finite float; bools and strings are rejected."""
    value = param.value
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise ParameterTypeError(param.key, value)
    result = float(value)
    if not math.isfinite(result):
        raise ParameterTypeError(param.key, value, expected="finite number")
    return result


def get_int(param: Param) -> int:
    """Read a param as an int; floats are accepted only when integral."""
    value = param.value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    result = get_float(param)
    if not result.is_integer():
        raise ParameterTypeError(param.key, value, expected="whole number")
    return int(result)


def require(params: Dict[str, Param], key: str) -> Param:
    try:
        return params[key]
    except KeyError:
        raise MissingParameterError(key) from None


def optional_float(params: Dict[str, Param], key: str) -> Optional[float]:
    param = params.get(key)
    return get_float(param) if param is not None else None


def optional_int(params: Dict[str, Param], key: str) -> Optional[int]:
    param = params.get(key)
    return get_int(param) if param is not None else None


def to_duration(minutes: float, key: str) -> timedelta:
    """Convert minutes to a timedelta; key names the input that drove the value."""
    try:
        return timedelta(minutes=minutes)
    except OverflowError:
        raise ParameterRangeError(
            f"{key} is too large: estimate exceeds {timedelta.max.days} days",
            key=key,
        ) from None
