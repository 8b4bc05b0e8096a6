"""Unit tests for the bill input boundary"""

import math
import pytest
from envecom_simulator.domain.coercion import (
    bill_input_from_mapping,
    normalize_extracted,
    parse_connection,
    parse_number,
    parse_number_or_zero,
)
from envecom_simulator.domain.exceptions import InvalidBillInputError
from envecom_simulator.domain.models import BillInput, ConnectionType


@pytest.mark.parametrize(
    "raw, expected",
    [
        (188, 188.0),
        (0.32766, 0.32766),
        ("188", 188.0),
        (" 24.39 ", 24.39),
        ("0,32766", 0.32766),
        ("1.234,56", 1234.56),
        ("R$ 24,39", 24.39),
        ("1,234.56", 1234.56),
        ("1.234.567,89", 1234567.89),
        ("1,234,567.89", 1234567.89),
        ("188.5", 188.5),
        (0, 0.0),
    ],
)
def test_parse_number_accepts_numeric_values(raw, expected):
    assert parse_number(raw) == pytest.approx(expected)


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", "abc", True, False, -1, "-5", math.nan, math.inf, [], {}, "1,234,567", "1,2.3,4", "1.234.567"],
)
def test_parse_number_rejects_invalid_values(raw):
    assert parse_number(raw) is None
    assert parse_number_or_zero(raw) == 0.0


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("mono", ConnectionType.MONO),
        ("BI", ConnectionType.BI),
        (" tri ", ConnectionType.TRI),
        ("single-phase", ConnectionType.MONO),
        ("two-phase", ConnectionType.BI),
        ("three-phase", ConnectionType.TRI),
        ("Monofásica", ConnectionType.MONO),
        (ConnectionType.BI, ConnectionType.BI),
        ("quad", None),
        (None, None),
        (3, None),
    ],
)
def test_parse_connection(raw, expected):
    assert parse_connection(raw) == expected


def test_full_record(bill_payload):
    bill = bill_input_from_mapping(bill_payload)

    assert bill == BillInput(
        client_name="Francinete Ferreira",
        consumer_unit="5121900",
        distributor="ENEL",
        reference_month="12/2025",
        connection=ConnectionType.MONO,
        total_kwh=188.0,
        te_rate=0.32766,
        tusd_rate=0.62154,
        yellow_flag_rate=0.0,
        red_flag_rate=0.0,
        public_lighting_fee=24.39,
        notes="",
    )


def test_empty_record_defaults_everything():
    bill = bill_input_from_mapping({})

    assert bill.client_name == ""
    assert bill.total_kwh == 0
    assert bill.te_rate == 0
    assert bill.public_lighting_fee == 0
    assert bill.connection == ConnectionType.TRI


def test_invalid_numbers_coerce_to_zero(bill_payload):
    bill_payload.update(
        consumo_total_kwh="lots",
        tarifa_te=None,
        tarifa_tusd=-0.5,
        iluminacao_publica=True,
    )

    bill = bill_input_from_mapping(bill_payload)

    assert bill.total_kwh == 0
    assert bill.te_rate == 0
    assert bill.tusd_rate == 0
    assert bill.public_lighting_fee == 0


def test_unknown_connection_falls_back_to_three_phase(bill_payload):
    bill_payload["tipo_ligacao"] = "quadrifasica"

    bill = bill_input_from_mapping(bill_payload)

    assert bill.connection == ConnectionType.TRI


def test_strict_mode_accepts_valid_record(bill_payload):
    bill = bill_input_from_mapping(bill_payload, strict=True)

    assert bill.total_kwh == 188.0


def test_strict_mode_lists_every_invalid_field(bill_payload):
    bill_payload.update(nome="  ", tarifa_te="abc", tipo_ligacao="quad")

    with pytest.raises(InvalidBillInputError) as exc_info:
        bill_input_from_mapping(bill_payload, strict=True)

    assert set(exc_info.value.errors) == {"nome", "tarifa_te", "tipo_ligacao"}


def test_strict_mode_treats_absent_numbers_as_zero(bill_payload):
    del bill_payload["tarifa_bandeira_amarela"]
    bill_payload["tarifa_bandeira_vermelha"] = None

    bill = bill_input_from_mapping(bill_payload, strict=True)

    assert bill.yellow_flag_rate == 0
    assert bill.red_flag_rate == 0


def test_strict_mode_requires_consumer_unit(bill_payload):
    del bill_payload["uc"]

    with pytest.raises(InvalidBillInputError) as exc_info:
        bill_input_from_mapping(bill_payload, strict=True)

    assert list(exc_info.value.errors) == ["uc"]


def test_normalize_extracted_keeps_only_present_known_fields():
    partial = normalize_extracted(
        {
            "nome": " Maria ",
            "uc": 5121900,
            "consumo_total_kwh": "188",
            "tarifa_te": "0,32766",
            "tarifa_tusd": "n/a",
            "tipo_ligacao": "bifásica",
            "confidence": 0.9,
        }
    )

    assert partial == {
        "nome": "Maria",
        "uc": "5121900",
        "consumo_total_kwh": 188.0,
        "tarifa_te": pytest.approx(0.32766),
        "tarifa_tusd": 0.0,
        "tipo_ligacao": "bi",
    }


def test_normalize_extracted_drops_unknown_connection():
    assert normalize_extracted({"tipo_ligacao": "industrial"}) == {}


def test_non_scalar_values_fall_back(bill_payload):
    """Booleans, objects and arrays never break the permissive boundary"""
    bill_payload.update(nome=False, uc={"id": 1}, tipo_ligacao=True, tarifa_te=[1], tarifa_tusd={"v": 1})

    bill = bill_input_from_mapping(bill_payload)

    assert bill.client_name == "False"
    assert bill.consumer_unit == "{'id': 1}"
    assert bill.connection == ConnectionType.TRI
    assert bill.te_rate == 0
    assert bill.tusd_rate == 0


def test_strict_mode_messages_are_in_portuguese(bill_payload):
    bill_payload.update(uc="", tarifa_te="abc")

    with pytest.raises(InvalidBillInputError) as exc_info:
        bill_input_from_mapping(bill_payload, strict=True)

    assert exc_info.value.errors["uc"] == "campo obrigatório"
    assert exc_info.value.errors["tarifa_te"].startswith("esperado um número")
