"""Compensation engine - core business logic for energy-credit simulations"""

from typing import List

from envecom_simulator.domain.models import (
    BillInput,
    CompensationReport,
    Comparison,
    Consumption,
    Identification,
    LineItem,
    Summary,
    TariffPolicy,
    DEFAULT_POLICY,
)

TE_LABEL = "Tarifa de Energia (TE)"
TUSD_LABEL = "TUSD (Ajustada -20%)"
YELLOW_FLAG_LABEL = "Bandeira Amarela"
RED_FLAG_LABEL = "Bandeira Vermelha"


def compensable_consumption(total_kwh: float, minimum_kwh: float) -> float:
    """Consumption above the regulatory minimum, never negative"""
    return max(0.0, total_kwh - minimum_kwh)


def build_line_items(bill: BillInput, compensable_kwh: float, policy: TariffPolicy) -> List[LineItem]:
    """
    Price the compensable consumption per tariff component.

    TE and TUSD are always present, TUSD at its adjusted rate. Flag
    surcharges only appear when the bill charges them.
    """
    adjusted_tusd = bill.tusd_rate * policy.tusd_credit_factor

    components = [
        (TE_LABEL, bill.te_rate, True),
        (TUSD_LABEL, adjusted_tusd, True),
        (YELLOW_FLAG_LABEL, bill.yellow_flag_rate, bill.yellow_flag_rate > 0),
        (RED_FLAG_LABEL, bill.red_flag_rate, bill.red_flag_rate > 0),
    ]

    return [
        LineItem(
            label=label,
            compensable_kwh=compensable_kwh,
            unit_rate=rate,
            value=compensable_kwh * rate,
        )
        for label, rate, active in components
        if active
    ]


def current_invoice_amount(bill: BillInput) -> float:
    """What the distributor would bill without compensation (unadjusted TUSD)"""
    full_rate = bill.te_rate + bill.tusd_rate + bill.yellow_flag_rate + bill.red_flag_rate
    return bill.total_kwh * full_rate + bill.public_lighting_fee


def reduction_percentage(current_invoice: float, new_final_total: float) -> float:
    """Relative invoice decrease in percent, 0 for a non-positive baseline"""
    if current_invoice <= 0:
        return 0.0
    return round((current_invoice - new_final_total) / current_invoice * 100, 2)


def compute_report(bill: BillInput, policy: TariffPolicy = DEFAULT_POLICY) -> CompensationReport:
    """
    Main entry point: turn bill parameters into a compensation report.

    Flow:
    1. Minimum floor from the connection class
    2. Compensable kWh above the floor
    3. Credit per tariff component (TUSD reduced by the ICMS factor)
    4. 20/80 split of the credit between member and association
    5. Current invoice vs. new final total, and the reduction percentage

    Only the reduction percentage is rounded; every other figure keeps full
    precision.
    """
    minimum_kwh = policy.floor_for(bill.connection)
    compensable_kwh = compensable_consumption(bill.total_kwh, minimum_kwh)

    line_items = build_line_items(bill, compensable_kwh, policy)
    credit_total = sum(item.value for item in line_items)

    member_share = credit_total * policy.member_share
    association_share = credit_total * policy.association_share

    current_invoice = current_invoice_amount(bill)
    new_final_total = (current_invoice - credit_total) + association_share

    return CompensationReport(
        identification=Identification(
            client_name=bill.client_name,
            consumer_unit=bill.consumer_unit,
            distributor=bill.distributor,
            reference_month=bill.reference_month,
            connection=bill.connection,
        ),
        consumption=Consumption(
            total_kwh=bill.total_kwh,
            minimum_kwh=minimum_kwh,
            compensable_kwh=compensable_kwh,
        ),
        line_items=tuple(line_items),
        summary=Summary(
            credit_total=credit_total,
            member_share=member_share,
            association_share=association_share,
            reduction_pct=reduction_percentage(current_invoice, new_final_total),
        ),
        comparison=Comparison(
            current_invoice=current_invoice,
            new_final_total=new_final_total,
        ),
    )
