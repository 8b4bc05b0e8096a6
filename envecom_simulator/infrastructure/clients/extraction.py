"""Gemini HTTP client for reading bill fields out of a bill image"""

import json
import re
from typing import Any, Dict, Optional, Protocol

import httpx

from envecom_simulator.config import settings
from envecom_simulator.domain.coercion import normalize_extracted
from envecom_simulator.domain.exceptions import ExtractionError, ExtractionNotConfiguredError
from envecom_simulator.infrastructure.observability.metrics import extraction_latency_histogram

DEFAULT_MIME_TYPE = "image/jpeg"

EXTRACTION_PROMPT = """Analise esta fatura de energia e extraia os dados estritamente no formato JSON.
Campos necessários:
{
  "nome": "Nome completo do titular",
  "uc": "Número da Unidade Consumidora",
  "distribuidora": "Nome da concessionária (ex: ENEL, COELCE, CPFL)",
  "mes_ref": "Mês de referência no formato MM/AAAA",
  "consumo_total_kwh": número (consumo total medido no mês),
  "tarifa_te": número (valor unitário da Tarifa de Energia - TE),
  "tarifa_tusd": número (valor unitário da Tarifa TUSD),
  "tarifa_bandeira_amarela": número (valor unitário adicional de bandeira amarela se houver),
  "tarifa_bandeira_vermelha": número (valor unitário adicional de bandeira vermelha se houver),
  "iluminacao_publica": número (valor total da taxa de iluminação pública/CIP/Cosip)
}
Importante: Retorne APENAS o objeto JSON puro, sem formatação markdown ou textos explicativos."""

_CODE_FENCE = re.compile(r"```(?:json)?")


class BillExtractor(Protocol):
    """Capability: image in, best-effort partial bill record out"""

    async def extract(self, image_base64: str, mime_type: Optional[str] = None) -> Dict[str, Any]:
        ...


def parse_model_text(text: str) -> Dict[str, Any]:
    """
    Parse the model's JSON answer, tolerating markdown code fences.

    Raises:
        ExtractionError: On empty text, malformed JSON or a non-object payload
    """
    cleaned = _CODE_FENCE.sub("", text or "").strip()
    if not cleaned:
        raise ExtractionError("Extraction service returned an empty response")

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ExtractionError(f"Extraction service returned malformed JSON: {e}") from e

    if not isinstance(data, dict):
        raise ExtractionError("Extraction service returned JSON that is not an object")
    return data


class GeminiExtractionClient:
    """Client for the Gemini generateContent API"""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key or settings.gemini_api_key
        self.base_url = base_url or settings.gemini_api_base
        self.model = model or settings.gemini_model
        self.timeout = timeout or settings.extraction_timeout_seconds
        self.transport = transport

    def build_request_body(self, image_base64: str, mime_type: str) -> Dict[str, Any]:
        return {
            "contents": [
                {
                    "parts": [
                        {"text": EXTRACTION_PROMPT},
                        {"inline_data": {"mime_type": mime_type, "data": image_base64}},
                    ]
                }
            ],
            "generationConfig": {
                "responseMimeType": "application/json",
                "temperature": settings.extraction_temperature,
            },
        }

    async def extract(self, image_base64: str, mime_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Read bill fields from a base64-encoded image.

        One request, no retries. The result is a partial, wire-keyed bill
        record: fields the model could not read are simply absent.

        Raises:
            ExtractionNotConfiguredError: When no API key is configured
            ExtractionError: On timeout, HTTP errors, or an unusable answer
        """
        if not self.api_key:
            raise ExtractionNotConfiguredError("Extraction API key is not configured")

        body = self.build_request_body(image_base64, mime_type or DEFAULT_MIME_TYPE)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with extraction_latency_histogram.time():
                    response = await client.post(
                        f"{self.base_url}/models/{self.model}:generateContent",
                        headers={"x-goog-api-key": self.api_key},
                        json=body,
                    )
                response.raise_for_status()
                payload = response.json()

                parts = payload["candidates"][0]["content"]["parts"]
                text = "".join(part.get("text", "") for part in parts)

            except httpx.TimeoutException as e:
                raise ExtractionError(f"Extraction service timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise ExtractionError(f"Extraction service error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise ExtractionError(f"Extraction service unreachable: {e}") from e
            except (KeyError, IndexError, ValueError, TypeError, AttributeError) as e:
                raise ExtractionError(f"Invalid response from extraction service: {e}") from e

        return normalize_extracted(parse_model_text(text))
