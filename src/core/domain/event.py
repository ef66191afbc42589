"""
Event & Boost — spacetime value objects

Immutable Pydantic models for an event in 1+1D spacetime and for the boost
(velocity parameter) relating two inertial frames. Both delegate all
arithmetic to src.core.math.lorentz; the models only add validation at
construction time.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.contracts.validators import validate_event
from src.core.math.lorentz import (
    IntervalType,
    check_beta,
    classify_interval,
    contraction_factor,
    invariant,
    inverse_transform,
    is_timelike,
    lorentz_factor,
    transform,
)
from src.core.math.numerical_safeguards import validate_finite


# =============================================================================
# EVENT MODEL
# =============================================================================


class Event(BaseModel):
    """
    A point (position, time) in 1+1D spacetime, natural units.

    Immutable model (frozen=True): boosting produces a new instance.
    """

    position: float = Field(..., description="Spatial coordinate x")
    time: float = Field(..., description="Time coordinate t")

    model_config = {"frozen": True}

    @field_validator("position", "time")
    @classmethod
    def validate_finite_coordinate(cls, v: float, info: ValidationInfo) -> float:
        """Coordinates must be finite floats."""
        return validate_finite(v, info.field_name)

    @classmethod
    def from_tuple(cls, coords: tuple[float, float]) -> "Event":
        """Build an event from an (x, t) pair."""
        x, t = coords
        return cls(position=x, time=t)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Event":
        """
        Build an event from a JSON payload {"x": ..., "t": ...}.

        Raises:
            jsonschema.ValidationError: if data violates the event contract
            pydantic.ValidationError: if a coordinate is not finite
        """
        validate_event(data)
        return cls(position=data["x"], time=data["t"])

    def to_payload(self) -> Dict[str, float]:
        """JSON payload matching the event contract."""
        return {"x": self.position, "t": self.time}

    def as_tuple(self) -> tuple[float, float]:
        return (self.position, self.time)

    def interval(self) -> float:
        """Spacetime interval magnitude √|t² - x²|."""
        return invariant(self.position, self.time)

    def is_timelike(self) -> bool:
        return is_timelike(self.position, self.time)

    def interval_type(self) -> IntervalType:
        return classify_interval(self.position, self.time)

    def boost(self, beta: float) -> "Event":
        """
        Coordinates of this event in a frame moving with velocity beta.

        Raises:
            InvalidParameter: if |beta| >= 1
            pydantic.ValidationError: if a boosted coordinate overflows to
                ±inf; the finite-coordinate check rejects the result
        """
        return Event.from_tuple(transform(self.position, self.time, beta))

    def unboost(self, beta: float) -> "Event":
        """
        Inverse of boost(beta).

        Raises:
            InvalidParameter: if |beta| >= 1
            pydantic.ValidationError: if a coordinate overflows to ±inf
        """
        return Event.from_tuple(inverse_transform(self.position, self.time, beta))


# =============================================================================
# BOOST MODEL
# =============================================================================


class Boost(BaseModel):
    """
    Velocity parameter β relating two inertial frames.

    |β| < 1 is enforced at construction; the Lorentz factor is derived on
    demand and never stored.
    """

    beta: float = Field(..., description="Relative velocity as a fraction of c")

    model_config = {"frozen": True}

    @field_validator("beta")
    @classmethod
    def validate_subluminal(cls, v: float) -> float:
        """|β| < 1; NaN rejected. InvalidParameter surfaces as ValidationError."""
        check_beta(v)
        return v

    @property
    def gamma(self) -> float:
        """Lorentz factor γ = 1/√(1 - β²)."""
        return lorentz_factor(self.beta)

    @property
    def alpha(self) -> float:
        """Contraction factor α = 1/γ."""
        return contraction_factor(self.beta)

    def inverse(self) -> "Boost":
        return Boost(beta=-self.beta)

    def apply(self, event: Event) -> Event:
        return event.boost(self.beta)

    def invert(self, event: Event) -> Event:
        return event.unboost(self.beta)
