"""
FastAPI routes for the Migration Planner estimation service.
"""

from typing import Any, Dict, List
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from migration_planner import __version__
from migration_planner.estimation import Estimation, EstimationError, build_params
from migration_planner.estimation.registry import UnknownCalculatorError, calculator_registry
from migration_planner.middleware import get_request_id_from_request

router = APIRouter()


# ============================================================
# Request Models
# ============================================================

class EstimateRequest(BaseModel):
    params: Dict[str, Any] = Field(default_factory=dict)


class MultiEstimateRequest(BaseModel):
    calculators: List[str]
    params: Dict[str, Any] = Field(default_factory=dict)


def _estimation_body(calculator_id: str, result: Estimation) -> Dict[str, Any]:
    seconds = result.duration.total_seconds()
    return {
        "calculator": calculator_id,
        "duration_seconds": seconds,
        "duration_minutes": seconds / 60,
        "reason": result.reason,
    }


def _error_body(e: EstimationError) -> Dict[str, Any]:
    return {"error": type(e).__name__, "key": e.key, "detail": str(e)}


# ============================================================
# Estimation
# ============================================================

@router.get("/estimation/calculators", tags=["Estimation"])
async def list_calculators() -> Dict[str, Any]:
    """List available calculators and the parameters they require."""
    calculators = calculator_registry.list()
    return {"calculators": calculators, "total": len(calculators)}


@router.post("/estimation/{calculator_id}", tags=["Estimation"])
async def run_estimation(calculator_id: str, body: EstimateRequest, request: Request):
    """Estimate one migration stage."""
    params = build_params(body.params)
    try:
        result = calculator_registry.run(calculator_id, params)
    except UnknownCalculatorError as e:
        raise HTTPException(404, str(e))
    except EstimationError as e:
        return JSONResponse(
            status_code=400,
            content={**_error_body(e), "request_id": get_request_id_from_request(request)},
        )
    return {**_estimation_body(calculator_id, result), "request_id": get_request_id_from_request(request)}


@router.post("/estimation", tags=["Estimation"])
async def run_estimations(body: MultiEstimateRequest, request: Request) -> Dict[str, Any]:
    """
    Estimate several stages against the same parameters.

    Each calculator runs independently; a failing one is reported as
    unavailable without affecting the others.
    """
    params = build_params(body.params)
    results = []
    for calculator_id in body.calculators:
        try:
            result = calculator_registry.run(calculator_id, params)
        except UnknownCalculatorError as e:
            results.append({"calculator": calculator_id, "error": "UnknownCalculatorError", "detail": str(e)})
            continue
        except EstimationError as e:
            results.append({"calculator": calculator_id, **_error_body(e)})
            continue
        results.append(_estimation_body(calculator_id, result))

    return {
        "results": results,
        "available": sum(1 for r in results if "error" not in r),
        "total": len(results),
        "request_id": get_request_id_from_request(request),
    }


# ============================================================
# Health
# ============================================================

@router.get("/health", tags=["Health"])
async def health_check() -> Dict[str, Any]:
    """Service health check."""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "estimation": calculator_registry.get_health_metrics(),
    }
