"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict, Optional
from fastapi.testclient import TestClient
from envecom_simulator.api.main import create_app
from envecom_simulator.api.dependencies import get_extractor
from envecom_simulator.domain.exceptions import ExtractionError
from envecom_simulator.domain.models import BillInput, ConnectionType


class FakeExtractor:
    """In-memory BillExtractor returning a canned payload or raising an error"""

    def __init__(self, payload: Optional[Dict[str, Any]] = None, error: Optional[ExtractionError] = None):
        self.payload = payload or {}
        self.error = error
        self.calls = []

    async def extract(self, image_base64: str, mime_type: Optional[str] = None) -> Dict[str, Any]:
        self.calls.append((image_base64, mime_type))
        if self.error is not None:
            raise self.error
        return dict(self.payload)


@pytest.fixture
def fake_extractor() -> FakeExtractor:
    return FakeExtractor(
        payload={
            "nome": "Francinete Ferreira",
            "uc": "5121900",
            "distribuidora": "ENEL",
            "mes_ref": "12/2025",
            "consumo_total_kwh": 188.0,
            "tarifa_te": 0.32766,
            "tarifa_tusd": 0.62154,
            "iluminacao_publica": 24.39,
        }
    )


@pytest.fixture
def client(fake_extractor: FakeExtractor) -> TestClient:
    """Create FastAPI test client with a fake extraction service"""
    app = create_app()
    app.dependency_overrides[get_extractor] = lambda: fake_extractor
    return TestClient(app)


@pytest.fixture
def single_phase_bill() -> BillInput:
    """Single-phase bill without flag surcharges (scenario A)"""
    return BillInput(
        client_name="Francinete Ferreira",
        consumer_unit="5121900",
        distributor="ENEL",
        reference_month="12/2025",
        connection=ConnectionType.MONO,
        total_kwh=188,
        te_rate=0.32766,
        tusd_rate=0.62154,
        public_lighting_fee=24.39,
    )


@pytest.fixture
def bill_payload() -> Dict[str, Any]:
    """Wire-keyed form submission for scenario A"""
    return {
        "nome": "Francinete Ferreira",
        "uc": "5121900",
        "distribuidora": "ENEL",
        "mes_ref": "12/2025",
        "tipo_ligacao": "mono",
        "consumo_total_kwh": 188,
        "tarifa_te": 0.32766,
        "tarifa_tusd": 0.62154,
        "tarifa_bandeira_amarela": 0,
        "tarifa_bandeira_vermelha": 0,
        "iluminacao_publica": 24.39,
        "outros_itens_texto": "",
    }
