"""Galaxy pipeline - applies the risk aggregator across a signal set"""

import logging
from typing import Iterable, List, Protocol
from risk_galaxy.domain.models import FileSignal, GalaxySummary, Prediction, RiskRecord, RiskStatus
from risk_galaxy.domain.exceptions import InvalidSignalError, NotFoundError
from risk_galaxy.domain.prediction import annotate
from risk_galaxy.domain.scoring import analyze_file
from risk_galaxy.domain.trend import RandomSource

logger = logging.getLogger(__name__)


class SignalProvider(Protocol):
    """Source of file signals for one pipeline run"""

    async def get_signals(self) -> List[FileSignal]: ...


def compute_galaxy(signals: Iterable[FileSignal], rng: RandomSource) -> List[RiskRecord]:
    """
    Score every file independently, preserving provider order.

    Raises:
        InvalidSignalError: Duplicate file ids or a degenerate signal
    """
    records = []
    seen_ids = set()
    for signal in signals:
        if signal.id in seen_ids:
            raise InvalidSignalError(f"Duplicate file id {signal.id!r} in signal set")
        seen_ids.add(signal.id)
        records.append(analyze_file(signal, rng))
    return records


def find_record(records: Iterable[RiskRecord], file_id: str) -> RiskRecord:
    """
    Look up a record by file id.

    Raises:
        NotFoundError: No record with that id in this run
    """
    for record in records:
        if record.id == str(file_id):
            return record
    raise NotFoundError(f"File {file_id!r} not found")


def compute_prediction(signals: Iterable[FileSignal], file_id: str, rng: RandomSource) -> Prediction:
    """Score the signal set and return one file's record with advisory text"""
    record = find_record(compute_galaxy(signals, rng), file_id)
    return annotate(record)


def summarize_galaxy(records: List[RiskRecord]) -> GalaxySummary:
    """Status distribution, mean score and hottest file of a galaxy run"""
    status_counts = {status: 0 for status in RiskStatus}
    for record in records:
        status_counts[record.status] += 1

    if not records:
        return GalaxySummary(total_files=0, status_counts=status_counts, average_score=0.0, hottest_file_id=None)

    average = sum(r.score for r in records) / len(records)
    hottest = max(records, key=lambda r: r.score)

    return GalaxySummary(
        total_files=len(records),
        status_counts=status_counts,
        average_score=round(average, 2),
        hottest_file_id=hottest.id,
    )


class GalaxyPipeline:
    """Runs the aggregator over a provider's snapshot; holds no state between runs"""

    def __init__(self, provider: SignalProvider, rng: RandomSource):
        self.provider = provider
        self.rng = rng

    async def compute_galaxy(self) -> List[RiskRecord]:
        signals = await self.provider.get_signals()
        records = compute_galaxy(signals, self.rng)
        logger.debug("Scored %d files", len(records))
        return records

    async def compute_prediction(self, file_id: str) -> Prediction:
        """
        Fetch, score and annotate a single file.

        Raises:
            NotFoundError: Unknown file id
            InvalidSignalError: Degenerate signal anywhere in the snapshot
        """
        signals = await self.provider.get_signals()
        return compute_prediction(signals, file_id, self.rng)
