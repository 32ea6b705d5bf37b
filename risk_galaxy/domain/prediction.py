"""Static advisory text attached to prediction views"""

from typing import Dict, Tuple
from risk_galaxy.domain.models import Prediction, RiskRecord, RiskStatus

# (prediction, recommendation) per status band
_ADVISORIES: Dict[RiskStatus, Tuple[str, str]] = {
    RiskStatus.CRITICAL: (
        "High likelihood of regression if complexity is not reduced.",
        "Target for refactoring in next sprint.",
    ),
    RiskStatus.HIGH: (
        "Elevated regression risk from recent churn and shared ownership.",
        "Assign a primary owner and add regression tests before further changes.",
    ),
    RiskStatus.MEDIUM: (
        "Moderate regression risk; monitor change frequency.",
        "Review on next touch and keep test coverage current.",
    ),
    RiskStatus.LOW: (
        "Low likelihood of regression.",
        "No action required.",
    ),
}


def advisory_for(status: RiskStatus) -> Tuple[str, str]:
    """Return fixed (prediction, recommendation) strings for a status"""
    return _ADVISORIES[status]


def annotate(record: RiskRecord) -> Prediction:
    """Attach advisory text to a computed risk record"""
    prediction, recommendation = advisory_for(record.status)
    return Prediction(record=record, prediction=prediction, recommendation=recommendation)
