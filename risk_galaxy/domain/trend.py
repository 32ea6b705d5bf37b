"""Synthetic trend series for the risk timeline view"""

from typing import List, Protocol
from risk_galaxy.domain.models import TrendPoint
from risk_galaxy.utils.math_utils import clamp

TREND_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun")
TREND_JITTER = 10.0


class RandomSource(Protocol):
    """Anything with random.Random's uniform()"""

    def uniform(self, a: float, b: float) -> float: ...


def generate_trend(
    score: float,
    rng: RandomSource,
    months: tuple[str, ...] = TREND_MONTHS,
    jitter: float = TREND_JITTER,
) -> List[TrendPoint]:
    """
    Generate a decorative 6-month series around the current score.

    This is NOT a historical reconstruction: each point is the current score
    plus independent uniform noise in [-jitter, +jitter], clamped to 0-100.
    Output differs between calls unless rng is seeded.

    Args:
        score: Current fragility score
        rng: Random source (pass random.Random(seed) for repeatable output)
        months: Fixed positional labels, not calendar-aware
        jitter: Half-width of the noise band

    Example:
        score 98.0, noise +7.5 → 100.0 (clamped)
    """
    return [
        TrendPoint(month=month, value=clamp(score + rng.uniform(-jitter, jitter)))
        for month in months
    ]
