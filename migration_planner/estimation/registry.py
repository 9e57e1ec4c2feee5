"""Calculator registry and invocation.

Maps stable calculator ids to configured instances and runs them with
timing, logging and call metrics. Each calculator is evaluated on its own;
nothing here sums stages into an overall migration time.
"""
import time
from typing import Any, Dict, List, Optional

from migration_planner.estimation.calculators import (
    PostMigrationTroubleshooting,
    StorageMigration,
)
from migration_planner.estimation.models import (
    Calculator,
    Estimation,
    EstimationError,
    Param,
)
from migration_planner.utils.config import EstimationConfig, config
from migration_planner.utils.logger import log_error, log_estimation


class UnknownCalculatorError(KeyError):
    """No calculator is registered under the requested id."""

    def __init__(self, calculator_id: str):
        super().__init__(calculator_id)
        self.calculator_id = calculator_id

    def __str__(self) -> str:
        return f"unknown calculator: {self.calculator_id}"


class CalculatorRegistry:
    def __init__(self, calculators: Optional[Dict[str, Calculator]] = None):
        self._calculators: Dict[str, Calculator] = dict(calculators or {})
        self._call_count = 0
        self._success_count = 0
        self._total_latency_ms = 0.0

    def register(self, calculator_id: str, calculator: Calculator) -> None:
        self._calculators[calculator_id] = calculator

    def get(self, calculator_id: str) -> Calculator:
        try:
            return self._calculators[calculator_id]
        except KeyError:
            raise UnknownCalculatorError(calculator_id) from None

    def list(self) -> List[Dict[str, Any]]:
        return [
            {"id": cid, "name": calc.name(), "keys": calc.keys()}
            for cid, calc in self._calculators.items()
        ]

    def _record_call(self, latency_ms: float, success: bool = True):
        self._call_count += 1
        if success:
            self._success_count += 1
        self._total_latency_ms += latency_ms

    def run(self, calculator_id: str, params: Dict[str, Param]) -> Estimation:
        """
        Run one calculator against a parameter registry.

        Raises:
            UnknownCalculatorError: If calculator_id is not registered
            EstimationError: Propagated unchanged from the calculator
        """
        calculator = self.get(calculator_id)
        t0 = time.perf_counter()
        try:
            result = calculator.calculate(params)
        except EstimationError as e:
            latency_ms = (time.perf_counter() - t0) * 1000
            self._record_call(latency_ms, success=False)
            log_error(type(e).__name__, str(e), calculator=calculator_id, key=e.key)
            raise

        latency_ms = (time.perf_counter() - t0) * 1000
        self._record_call(latency_ms)
        log_estimation(
            calculator_id,
            "ok",
            duration_ms=latency_ms,
            params={k: p.value for k, p in params.items()},
            result_minutes=result.minutes,
        )
        return result

    def get_health_metrics(self) -> Dict[str, Any]:
        avg = self._total_latency_ms / max(self._call_count, 1)
        return {
            "calculators": len(self._calculators),
            "total_calls": self._call_count,
            "success_rate": round(self._success_count / max(self._call_count, 1), 4),
            "avg_latency_ms": round(avg, 3),
            "status": "healthy",
        }


def default_registry(settings: Optional[EstimationConfig] = None) -> CalculatorRegistry:
    """Build the registry served by the API from configured defaults."""
    settings = settings or config.estimation
    return CalculatorRegistry({
        "post_migration_troubleshooting": PostMigrationTroubleshooting(
            troubleshoot_mins_per_vm=settings.troubleshoot_mins_per_vm,
            engineer_count=settings.engineer_count,
            work_hours_per_day=settings.work_hours_per_day,
        ),
        "storage_migration": StorageMigration(
            transfer_rate_mbps=settings.transfer_rate_mbps,
        ),
    })


calculator_registry = default_registry()
