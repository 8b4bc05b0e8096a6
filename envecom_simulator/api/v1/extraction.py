"""POST /v1/extractions - read bill fields from an uploaded image"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from envecom_simulator.api.v1.schemas import ExtractionRequest, ExtractionResponse
from envecom_simulator.api.dependencies import get_extractor, get_request_id
from envecom_simulator.domain.exceptions import ExtractionError, ExtractionNotConfiguredError
from envecom_simulator.infrastructure.clients.extraction import BillExtractor
from envecom_simulator.infrastructure.observability.metrics import record_extraction

router = APIRouter()

MANUAL_FALLBACK_MESSAGE = (
    "Não foi possível ler a fatura automaticamente. Por favor, preencha os campos manualmente."
)
MISSING_IMAGE_MESSAGE = "Dados da imagem ausentes"
NOT_CONFIGURED_MESSAGE = "Serviço de leitura de faturas não configurado"


@router.post("/extractions", response_model=ExtractionResponse, response_model_exclude_none=True)
async def create_extraction(
    request_body: ExtractionRequest,
    request: Request,
    extractor: BillExtractor = Depends(get_extractor),
):
    """
    Extract a partial bill record from an image.

    A failure is recoverable: the caller keeps the form and fills it by hand.
    """
    request_id = get_request_id(request)

    if not request_body.base64:
        raise HTTPException(status_code=400, detail=MISSING_IMAGE_MESSAGE)

    try:
        extracted = await extractor.extract(request_body.base64, request_body.mime_type)

    except ExtractionNotConfiguredError as e:
        record_extraction(False)
        logging.error(f"Extraction not configured: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail=NOT_CONFIGURED_MESSAGE)

    except ExtractionError as e:
        record_extraction(False)
        logging.error(f"Extraction failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=502, detail=MANUAL_FALLBACK_MESSAGE)

    record_extraction(True)
    return ExtractionResponse(**extracted)
