"""Unit tests for report serialization"""

import dataclasses
import json
import pytest
from envecom_simulator.domain.compensation import compute_report
from envecom_simulator.domain.models import BillInput
from envecom_simulator.domain.serialization import report_from_dict, report_to_dict


def test_report_shape(single_phase_bill: BillInput):
    data = report_to_dict(compute_report(single_phase_bill))

    assert set(data) == {"identificacao", "consumo", "itens_compensacao", "resumo", "comparativo"}
    assert data["identificacao"] == {
        "cliente": "Francinete Ferreira",
        "uc": "5121900",
        "distribuidora": "ENEL",
        "mes_referencia": "12/2025",
        "tipo_ligacao": "mono",
    }
    assert data["consumo"] == {"total": 188, "minimo": 30, "compensado": 158}
    assert set(data["itens_compensacao"][0]) == {"descricao", "consumo", "tarifa", "valor"}
    assert set(data["resumo"]) == {
        "valor_credito_total",
        "economia_mensal_associado",
        "repasse_envecom",
        "reducao_percentual",
    }
    assert set(data["comparativo"]) == {"fatura_atual", "novo_total_final"}


def test_json_round_trip_reproduces_report(single_phase_bill: BillInput):
    bill = dataclasses.replace(single_phase_bill, yellow_flag_rate=0.02165, red_flag_rate=0.00782)
    report = compute_report(bill)

    restored = report_from_dict(json.loads(json.dumps(report_to_dict(report))))

    assert restored == report
    assert report_to_dict(restored) == report_to_dict(report)


def test_from_dict_rejects_incomplete_payload():
    with pytest.raises(KeyError):
        report_from_dict({"identificacao": {}})
