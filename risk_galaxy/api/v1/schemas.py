"""Pydantic schemas for API responses"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from risk_galaxy.domain.models import GalaxySummary, Prediction, RiskRecord, RiskStatus


class MetricsSchema(BaseModel):
    """Sub-score breakdown"""

    churn: float = Field(..., ge=0, le=100)
    expertise: float = Field(..., ge=0, le=100)
    complexity: float
    historicalBugs: int


class TrendPointSchema(BaseModel):
    """Single synthetic trend point"""

    month: str
    value: float = Field(..., ge=0, le=100)


class RiskRecordSchema(BaseModel):
    """Fragility record for one file"""

    id: str
    name: str
    path: str
    score: float = Field(..., ge=0, le=100)
    metrics: MetricsSchema
    trend: List[TrendPointSchema]
    status: RiskStatus

    @classmethod
    def from_record(cls, record: RiskRecord) -> "RiskRecordSchema":
        return cls(**_record_fields(record))


class SummarySchema(BaseModel):
    """Aggregate view of a galaxy run"""

    total_files: int
    status_counts: Dict[RiskStatus, int]
    average_score: float
    hottest_file_id: Optional[str] = None

    @classmethod
    def from_summary(cls, summary: GalaxySummary) -> "SummarySchema":
        return cls(
            total_files=summary.total_files,
            status_counts=summary.status_counts,
            average_score=summary.average_score,
            hottest_file_id=summary.hottest_file_id,
        )


class GalaxyResponse(BaseModel):
    """Response for GET /v1/risk/galaxy"""

    files: List[RiskRecordSchema]
    summary: SummarySchema


class PredictionResponse(RiskRecordSchema):
    """Response for GET /v1/risk/predict/{file_id}"""

    prediction: str
    recommendation: str

    @classmethod
    def from_prediction(cls, result: Prediction) -> "PredictionResponse":
        return cls(
            **_record_fields(result.record),
            prediction=result.prediction,
            recommendation=result.recommendation,
        )


def _record_fields(record: RiskRecord) -> dict:
    return {
        "id": record.id,
        "name": record.name,
        "path": record.path,
        "score": record.score,
        "metrics": MetricsSchema(
            churn=record.metrics.churn,
            expertise=record.metrics.expertise,
            complexity=record.metrics.complexity,
            historicalBugs=record.metrics.historical_bugs,
        ),
        "trend": [TrendPointSchema(month=p.month, value=p.value) for p in record.trend],
        "status": record.status,
    }
