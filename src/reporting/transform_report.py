"""Transform report: one boost, both frames, invariants side by side

Collects everything needed to present a single Lorentz transform to a
human reader:
- original and transformed coordinates
- interval type and the name of the invariant quantity
- the invariant evaluated in both frames
- transform parameters c, β, γ, α = 1/γ

Numbers in TransformReport are kept at full precision; rounding is applied
only by render().
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.core.math.lorentz import (
    SPEED_OF_LIGHT,
    IntervalType,
    classify_interval,
    contraction_factor,
    interval_preserved,
    invariant,
    lorentz_factor,
    transform,
)
from src.core.math.numerical_safeguards import EPS_FLOAT_COMPARE_ABS, EPS_FLOAT_COMPARE_REL

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Decimal digits shown by render()
DISPLAY_DIGITS_DEFAULT: Final[int] = 6


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class TransformReport:
    """Result of reporting on one transform."""

    # Coordinates
    x: float
    t: float
    x_prime: float
    t_prime: float

    # Invariants
    interval_type: IntervalType
    invariant_original: float
    invariant_transformed: float
    interval_preserved: bool

    # Parameters
    c: float
    beta: float
    gamma: float
    alpha: float

    @property
    def quantity_name(self) -> str:
        return self.interval_type.quantity_name


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ReportConfig:
    """Configuration of the transform reporter.

    digits only affects rendering; the tolerances decide interval_preserved.
    """

    digits: int = DISPLAY_DIGITS_DEFAULT
    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS


# =============================================================================
# REPORTER
# =============================================================================


class TransformReporter:
    """Builds and renders TransformReport objects.

    The interval type is always taken from the original event.
    """

    def __init__(self, config: ReportConfig | None = None):
        """Initialize the reporter.

        Args:
            config: reporter configuration (optional, defaults used otherwise)
        """
        self.config = config or ReportConfig()

    def build(self, x: float, t: float, beta: float) -> TransformReport:
        """Transform (x, t) with beta and collect the report.

        Raises:
            InvalidParameter: if |beta| >= 1
        """
        x_prime, t_prime = transform(x, t, beta)

        preserved = interval_preserved(
            x, t, x_prime, t_prime,
            rel_tol=self.config.rel_tol,
            abs_tol=self.config.abs_tol,
        )
        if not preserved:
            logger.warning(
                "interval not preserved within tolerance: (%r, %r) -> (%r, %r), beta=%r",
                x, t, x_prime, t_prime, beta,
            )

        return TransformReport(
            x=x,
            t=t,
            x_prime=x_prime,
            t_prime=t_prime,
            interval_type=classify_interval(x, t),
            invariant_original=invariant(x, t),
            invariant_transformed=invariant(x_prime, t_prime),
            interval_preserved=preserved,
            c=SPEED_OF_LIGHT,
            beta=beta,
            gamma=lorentz_factor(beta),
            alpha=contraction_factor(beta),
        )

    def render(self, report: TransformReport) -> str:
        """Render a report as human-readable text, rounded to config.digits."""
        digits = self.config.digits
        name = report.quantity_name

        lines = [
            "=== Lorentz Transformation ===",
            "Original coordinates:",
            f"  x = {report.x}",
            f"  t = {report.t}",
            "",
            "Transformed coordinates:",
            f"  x' = {round(report.x_prime, digits)}",
            f"  t' = {round(report.t_prime, digits)}",
            "",
            "Invariant quantities:",
            f"  Interval type: {report.interval_type.value}",
            f"  {name} (original): {round(report.invariant_original, digits)}",
            f"  {name} (transformed): {round(report.invariant_transformed, digits)}",
            "",
            "Transformation parameters:",
            f"  c = {report.c}",
            f"  beta = {report.beta}",
            f"  gamma = {round(report.gamma, digits)}",
            f"  alpha = 1/gamma = {round(report.alpha, digits)}",
        ]
        return "\n".join(lines)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def build_report(
    x: float, t: float, beta: float, config: ReportConfig | None = None
) -> TransformReport:
    """Build a TransformReport with the given (or default) configuration."""
    return TransformReporter(config).build(x, t, beta)


def format_report(report: TransformReport, config: ReportConfig | None = None) -> str:
    """Render a TransformReport with the given (or default) configuration."""
    return TransformReporter(config).render(report)
