"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from envecom_simulator.config import settings
from envecom_simulator.domain.models import TariffPolicy, DEFAULT_POLICY
from envecom_simulator.infrastructure.clients.extraction import BillExtractor, GeminiExtractionClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_strict_validation() -> bool:
    """Whether bill inputs are validated instead of coerced"""
    return settings.strict_validation


def get_tariff_policy() -> TariffPolicy:
    return DEFAULT_POLICY


def get_extractor() -> BillExtractor:
    """Provide bill image extraction client instance"""
    return GeminiExtractionClient()
