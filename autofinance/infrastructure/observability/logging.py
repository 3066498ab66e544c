"""Structured JSON logging for engine calculations"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

from pythonjsonlogger import jsonlogger

from autofinance.config import settings

LOG_FORMAT = "%(timestamp)s %(level)s %(name)s %(message)s"

# Loggers that echo every request at INFO; kept at WARNING
QUIET_LOGGERS = ("uvicorn.access", "httpx")


class EngineJsonFormatter(jsonlogger.JsonFormatter):
    """Adds a UTC timestamp, the level name and the service name to each record"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: Optional[str] = None) -> None:
    """Route the root logger to stdout as JSON, replacing any existing handlers"""
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(EngineJsonFormatter(LOG_FORMAT))
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def log_preapproval(
    request_id: str,
    vehicle_id: Optional[str],
    status: str,
    approval_percentage: int,
    duration_ms: float,
) -> None:
    """Log structured pre-approval outcome for analysis"""
    logging.info(
        "Pre-approval check completed",
        extra={
            "request_id": request_id,
            "step": "preapproval_complete",
            "vehicle_id": vehicle_id or "generic",
            "likelihood_status": status,
            "approval_percentage": approval_percentage,
            "duration_ms": duration_ms,
        },
    )


def log_recommendation(
    request_id: str,
    catalog_size: int,
    affordable_count: int,
    top_ids: Sequence[str],
    duration_ms: float,
) -> None:
    """Log structured recommendation outcome"""
    logging.info(
        "Recommendation completed",
        extra={
            "request_id": request_id,
            "step": "recommendation_complete",
            "catalog_size": catalog_size,
            "affordable_count": affordable_count,
            "top_vehicle_ids": list(top_ids),
            "duration_ms": duration_ms,
        },
    )
