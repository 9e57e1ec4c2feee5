"""
Core estimation types.

A caller builds a parameter registry (``Dict[str, Param]``), hands it to one
or more calculators and gets back an ``Estimation`` per calculator, or an
``EstimationError`` describing why that stage cannot be estimated.
"""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class Param(BaseModel):
    """A single named input value supplied for one estimation call"""
    key: str
    value: Any

    class Config:
        frozen = True


class Estimation(BaseModel):
    """Estimated duration of a migration stage plus its rationale"""
    duration: timedelta = timedelta(0)
    reason: str = ""

    class Config:
        frozen = True

    @property
    def minutes(self) -> float:
        return self.duration.total_seconds() / 60


# ============================================================
# Errors
# ============================================================

class EstimationError(ValueError):
    """Base class for calculator failures. No partial result accompanies it."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class MissingParameterError(EstimationError):
    """A required parameter is absent from the registry."""

    def __init__(self, key: str):
        super().__init__(f"missing {key}", key=key)


class ParameterTypeError(EstimationError):
    """A parameter is present but cannot be read as the expected type."""

    def __init__(self, key: str, value: Any, expected: str = "number"):
        super().__init__(
            f"{key} must be a {expected}, got {type(value).__name__} {value!r}",
            key=key,
        )
        self.value = value


class ParameterRangeError(EstimationError):
    """A parameter (or resolved setting) is outside its valid domain."""


# ============================================================
# Calculator contract
# ============================================================

class Calculator(ABC):
    """
    A configured, reusable estimator for one migration stage.

    Implementations hold read-only configuration only, so a single instance
    may serve concurrent calls.
    """

    @abstractmethod
    def name(self) -> str:
        """Stable, human-readable identifier"""

    @abstractmethod
    def keys(self) -> List[str]:
        """Parameter keys without which no meaningful estimate exists"""

    @abstractmethod
    def calculate(self, params: Dict[str, Param]) -> Estimation:
        """
        Estimate the stage duration.

        Args:
            params: Parameter registry; unknown keys are ignored

        Returns:
            Estimation for this stage

        Raises:
            EstimationError: On a missing, mistyped or out-of-range parameter
        """
