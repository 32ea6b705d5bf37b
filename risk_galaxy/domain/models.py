"""Domain models - pure Python dataclasses representing risk entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class RiskStatus(str, Enum):
    """Categorical fragility band"""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class ChangeEvent:
    """Single modification of a tracked file"""

    days_ago: int


@dataclass(frozen=True)
class AuthorContribution:
    """Commit count of one author on a file"""

    name: str
    commits: int


@dataclass(frozen=True)
class FileSignal:
    """Historical signals for one tracked file, as supplied by a signal provider"""

    id: str
    name: str
    path: str
    complexity: float  # observed range 0-100
    historical_bugs: int
    change_history: List[ChangeEvent] = field(default_factory=list)
    authors: List[AuthorContribution] = field(default_factory=list)


@dataclass(frozen=True)
class RiskMetrics:
    """Sub-scores behind a fragility score"""

    churn: float
    expertise: float
    complexity: float
    historical_bugs: int


@dataclass(frozen=True)
class TrendPoint:
    """One month of the synthetic trend series"""

    month: str
    value: float


@dataclass(frozen=True)
class RiskRecord:
    """Output of risk aggregation for one file"""

    id: str
    name: str
    path: str
    score: float
    metrics: RiskMetrics
    trend: List[TrendPoint]
    status: RiskStatus


@dataclass(frozen=True)
class Prediction:
    """Risk record annotated with static advisory text"""

    record: RiskRecord
    prediction: str
    recommendation: str


@dataclass(frozen=True)
class GalaxySummary:
    """Aggregate view over a full galaxy run"""

    total_files: int
    status_counts: Dict[RiskStatus, int]
    average_score: float
    hottest_file_id: Optional[str]
