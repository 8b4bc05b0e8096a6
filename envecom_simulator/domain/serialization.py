"""Conversion between CompensationReport and its JSON-compatible report shape"""

from typing import Any, Dict

from envecom_simulator.domain.models import (
    CompensationReport,
    Comparison,
    Consumption,
    ConnectionType,
    Identification,
    LineItem,
    Summary,
)


def report_to_dict(report: CompensationReport) -> Dict[str, Any]:
    """Serialize a report using the key names shared with report renderers"""
    ident = report.identification
    return {
        "identificacao": {
            "cliente": ident.client_name,
            "uc": ident.consumer_unit,
            "distribuidora": ident.distributor,
            "mes_referencia": ident.reference_month,
            "tipo_ligacao": ident.connection.value,
        },
        "consumo": {
            "total": report.consumption.total_kwh,
            "minimo": report.consumption.minimum_kwh,
            "compensado": report.consumption.compensable_kwh,
        },
        "itens_compensacao": [
            {
                "descricao": item.label,
                "consumo": item.compensable_kwh,
                "tarifa": item.unit_rate,
                "valor": item.value,
            }
            for item in report.line_items
        ],
        "resumo": {
            "valor_credito_total": report.summary.credit_total,
            "economia_mensal_associado": report.summary.member_share,
            "repasse_envecom": report.summary.association_share,
            "reducao_percentual": report.summary.reduction_pct,
        },
        "comparativo": {
            "fatura_atual": report.comparison.current_invoice,
            "novo_total_final": report.comparison.new_final_total,
        },
    }


def report_from_dict(data: Dict[str, Any]) -> CompensationReport:
    """
    Rebuild a report from its serialized shape.

    Raises:
        KeyError, ValueError: When the payload is not a serialized report
    """
    ident = data["identificacao"]
    consumption = data["consumo"]
    summary = data["resumo"]
    comparison = data["comparativo"]

    return CompensationReport(
        identification=Identification(
            client_name=ident["cliente"],
            consumer_unit=ident["uc"],
            distributor=ident["distribuidora"],
            reference_month=ident["mes_referencia"],
            connection=ConnectionType(ident["tipo_ligacao"]),
        ),
        consumption=Consumption(
            total_kwh=consumption["total"],
            minimum_kwh=consumption["minimo"],
            compensable_kwh=consumption["compensado"],
        ),
        line_items=tuple(
            LineItem(
                label=item["descricao"],
                compensable_kwh=item["consumo"],
                unit_rate=item["tarifa"],
                value=item["valor"],
            )
            for item in data["itens_compensacao"]
        ),
        summary=Summary(
            credit_total=summary["valor_credito_total"],
            member_share=summary["economia_mensal_associado"],
            association_share=summary["repasse_envecom"],
            reduction_pct=summary["reducao_percentual"],
        ),
        comparison=Comparison(
            current_invoice=comparison["fatura_atual"],
            new_final_total=comparison["novo_total_final"],
        ),
    )
