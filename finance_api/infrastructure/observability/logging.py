"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from finance_api.config import settings


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

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_record_write(request_id: str, owner_id: str, entity: str, operation: str, year_month: str) -> None:
    """Log a created or modified expense/revenue with its bucket"""
    logging.info(
        "Record written",
        extra={
            "request_id": request_id,
            "owner_id": owner_id,
            "entity": entity,
            "operation": operation,
            "year_month": year_month,
        },
    )


def log_schedule_generated(request_id: str, owner_id: str, debt_id: str, reason: str, installments: int) -> None:
    """Log an installment schedule (re)generation"""
    logging.info(
        "Installment schedule generated",
        extra={
            "request_id": request_id,
            "owner_id": owner_id,
            "debt_id": debt_id,
            "step": "schedule_" + reason,
            "installments": installments,
        },
    )


def log_summary(request_id: str, owner_id: str, kind: str, period: str, duration_ms: float) -> None:
    """Log a served dashboard summary"""
    logging.info(
        "Summary completed",
        extra={
            "request_id": request_id,
            "owner_id": owner_id,
            "step": f"summary_{kind}",
            "period": period,
            "duration_ms": duration_ms,
        },
    )
