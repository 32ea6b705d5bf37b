"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from risk_galaxy.config import settings
from risk_galaxy.domain.models import GalaxySummary


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_galaxy_computed(request_id: str, summary: GalaxySummary, duration_ms: float) -> None:
    """Log structured galaxy run outcome"""
    logging.info(
        "Galaxy computed",
        extra={
            "request_id": request_id,
            "step": "galaxy_complete",
            "total_files": summary.total_files,
            "status_counts": {status.value: count for status, count in summary.status_counts.items()},
            "average_score": summary.average_score,
            "hottest_file_id": summary.hottest_file_id,
            "duration_ms": duration_ms,
        },
    )
