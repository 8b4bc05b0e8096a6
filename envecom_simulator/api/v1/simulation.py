"""POST /v1/simulations - energy compensation simulation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from envecom_simulator.api.v1.schemas import BillInputRequest, SimulationResponse
from envecom_simulator.api.dependencies import get_request_id, get_strict_validation, get_tariff_policy
from envecom_simulator.domain.coercion import bill_input_from_mapping
from envecom_simulator.domain.compensation import compute_report
from envecom_simulator.domain.exceptions import InvalidBillInputError
from envecom_simulator.domain.models import TariffPolicy
from envecom_simulator.domain.projection import annual_saving
from envecom_simulator.domain.report_view import build_projection_points, build_report_view
from envecom_simulator.domain.serialization import report_to_dict
from envecom_simulator.infrastructure.observability.metrics import record_simulation
from envecom_simulator.infrastructure.observability.logging import log_simulation

router = APIRouter()

INVALID_INPUT_MESSAGE = "Dados da fatura inválidos. Verifique os campos e tente novamente."


@router.post("/simulations", response_model=SimulationResponse)
def create_simulation(
    request_body: BillInputRequest,
    request: Request,
    strict: bool = Depends(get_strict_validation),
    policy: TariffPolicy = Depends(get_tariff_policy),
):
    """
    Compute the compensation report for a bill.

    Flow:
    1. Coerce the submitted fields into a BillInput (or reject them in strict mode)
    2. Compute the compensation report
    3. Attach the 12-month accumulated saving projection and display strings
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        bill = bill_input_from_mapping(request_body.model_dump(), strict=strict, policy=policy)
    except InvalidBillInputError as e:
        logging.warning(f"Invalid bill input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail={"message": INVALID_INPUT_MESSAGE, "errors": e.errors})

    report = compute_report(bill, policy)
    member_share = report.summary.member_share

    duration_ms = (time.time() - start_time) * 1000
    record_simulation(bill.connection.value, report.summary.credit_total)
    log_simulation(
        request_id,
        bill.consumer_unit,
        bill.connection.value,
        report.summary.credit_total,
        report.summary.reduction_pct,
        duration_ms,
    )

    return SimulationResponse(
        relatorio=report_to_dict(report),
        projecao=build_projection_points(member_share),
        economia_anual=annual_saving(member_share),
        view=build_report_view(report),
    )
