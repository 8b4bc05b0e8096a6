"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter

from envecom_simulator.config import settings


class CustomJsonFormatter(JsonFormatter):
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


def log_simulation(
    request_id: str,
    consumer_unit: str,
    connection: str,
    credit_total: float,
    reduction_pct: float,
    duration_ms: float,
) -> None:
    """Log structured simulation outcome for analysis"""
    logging.info(
        "Simulation completed",
        extra={
            "request_id": request_id,
            "consumer_unit": consumer_unit,
            "step": "simulation_complete",
            "connection": connection,
            "credit_total": round(credit_total, 2),
            "reduction_pct": reduction_pct,
            "duration_ms": duration_ms,
        },
    )
