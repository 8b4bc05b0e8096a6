"""Read-only dashboard view of a compensation report"""

from typing import Any, Dict, List

from envecom_simulator.domain.models import CompensationReport
from envecom_simulator.domain.projection import monthly_projection
from envecom_simulator.utils.formatting import (
    CONNECTION_LABELS,
    format_currency,
    format_kwh,
    format_percentage,
    format_tariff,
)


def build_projection_points(member_share: float) -> List[Dict[str, Any]]:
    """Label each accumulated value with its month, 'mês 1' to 'mês 12'"""
    return [
        {"mes": f"mês {month}", "acumulado": value}
        for month, value in enumerate(monthly_projection(member_share), start=1)
    ]


def build_report_view(report: CompensationReport) -> Dict[str, Any]:
    """Format every figure a renderer prints, plus the saving projection"""
    projection = monthly_projection(report.summary.member_share)

    return {
        "tipo_ligacao": CONNECTION_LABELS[report.identification.connection],
        "consumo": {
            "total": format_kwh(report.consumption.total_kwh),
            "minimo": format_kwh(report.consumption.minimum_kwh),
            "compensado": format_kwh(report.consumption.compensable_kwh),
        },
        "itens_compensacao": [
            {
                "descricao": item.label,
                "consumo": format_kwh(item.compensable_kwh),
                "tarifa": format_tariff(item.unit_rate),
                "valor": format_currency(item.value),
            }
            for item in report.line_items
        ],
        "resumo": {
            "valor_credito_total": format_currency(report.summary.credit_total),
            "economia_mensal_associado": format_currency(report.summary.member_share),
            "repasse_envecom": format_currency(report.summary.association_share),
            "reducao_percentual": format_percentage(report.summary.reduction_pct),
        },
        "comparativo": {
            "fatura_atual": format_currency(report.comparison.current_invoice),
            "novo_total_final": format_currency(report.comparison.new_final_total),
        },
        "projecao": [format_currency(value) for value in projection],
        "economia_anual": format_currency(projection[-1]),
    }
