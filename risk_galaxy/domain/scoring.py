"""Risk aggregation engine - converts file signals into fragility records"""

import math
from typing import List
from risk_galaxy.domain.models import (
    AuthorContribution,
    ChangeEvent,
    FileSignal,
    RiskMetrics,
    RiskRecord,
    RiskStatus,
)
from risk_galaxy.domain.exceptions import InvalidSignalError
from risk_galaxy.domain.trend import RandomSource, generate_trend

CHURN_WINDOW_DAYS = 30
CHURN_POINTS_PER_CHANGE = 10

CHURN_WEIGHT = 0.4
EXPERTISE_WEIGHT = 0.3
COMPLEXITY_WEIGHT = 0.4

MAX_SCORE = 100.0


def validate_signal(signal: FileSignal) -> None:
    """
    Reject signals the aggregator cannot score.

    Raises:
        InvalidSignalError: Missing authors, negative counts, zero total commits,
            or a non-finite/negative complexity
    """
    if not signal.authors:
        raise InvalidSignalError(f"File {signal.id} has no authors")

    if any(a.commits < 0 for a in signal.authors):
        raise InvalidSignalError(f"File {signal.id} has a negative commit count")

    if sum(a.commits for a in signal.authors) == 0:
        raise InvalidSignalError(f"File {signal.id} has zero total commits")

    if any(e.days_ago < 0 for e in signal.change_history):
        raise InvalidSignalError(f"File {signal.id} has a change event in the future")

    if signal.historical_bugs < 0:
        raise InvalidSignalError(f"File {signal.id} has a negative bug count")

    if not math.isfinite(signal.complexity) or signal.complexity < 0:
        raise InvalidSignalError(f"File {signal.id} has invalid complexity {signal.complexity!r}")


def calculate_churn_score(history: List[ChangeEvent]) -> float:
    """
    Recent change intensity, 0-100.

    Each change inside the last 30 days adds 10 points, saturating at 10 changes.
    """
    recent_changes = sum(1 for event in history if event.days_ago <= CHURN_WINDOW_DAYS)
    return float(min(MAX_SCORE, recent_changes * CHURN_POINTS_PER_CHANGE))


def calculate_expertise_debt(authors: List[AuthorContribution]) -> float:
    """
    Ownership fragmentation, 0-100.

    A single dominant owner (ownership ratio -> 1) yields ~0 debt,
    an even split across N authors yields (1 - 1/N) * 100.

    Raises:
        InvalidSignalError: No commits at all, so no ownership ratio exists
    """
    total_commits = sum(a.commits for a in authors)
    if total_commits <= 0:
        raise InvalidSignalError("Cannot compute ownership ratio with zero total commits")

    ownership_ratio = max(a.commits for a in authors) / total_commits
    return min(MAX_SCORE, (1 - ownership_ratio) * 100)


def calculate_complexity_score(complexity: float) -> float:
    """Weighted complexity pass-through (unbounded, absorbed by the final clamp)"""
    return complexity * COMPLEXITY_WEIGHT


def calculate_fragility_score(churn: float, expertise_debt: float, complexity_score: float) -> float:
    """
    Combine sub-scores into the unified fragility score.

    Scoring weights:
    - 40%: Churn
    - 30%: Expertise debt
    - complexity_score arrives pre-weighted at 40%

    Result is clamped to 100 but left unrounded; only the published record score is rounded.
    """
    raw = (churn * CHURN_WEIGHT) + (expertise_debt * EXPERTISE_WEIGHT) + complexity_score
    return min(MAX_SCORE, raw)


def determine_status(score: float) -> RiskStatus:
    """
    Map fragility score to a status band.

    Bounds are exclusive: 75.00 is HIGH, 75.01 is CRITICAL.
    """
    if score > 75:
        return RiskStatus.CRITICAL
    elif score > 50:
        return RiskStatus.HIGH
    elif score > 25:
        return RiskStatus.MEDIUM
    else:
        return RiskStatus.LOW


def analyze_file(signal: FileSignal, rng: RandomSource) -> RiskRecord:
    """
    Main entry point: score one file signal.

    Returns complete RiskRecord with score, metrics, status and a synthetic trend.
    """
    validate_signal(signal)

    churn = calculate_churn_score(signal.change_history)
    expertise_debt = calculate_expertise_debt(signal.authors)
    complexity_score = calculate_complexity_score(signal.complexity)
    fragility = calculate_fragility_score(churn, expertise_debt, complexity_score)

    # Status and trend use the raw score; only the published score is rounded
    return RiskRecord(
        id=signal.id,
        name=signal.name,
        path=signal.path,
        score=round(fragility, 2),
        metrics=RiskMetrics(
            churn=churn,
            expertise=expertise_debt,
            complexity=signal.complexity,
            historical_bugs=signal.historical_bugs,
        ),
        trend=generate_trend(fragility, rng),
        status=determine_status(fragility),
    )
