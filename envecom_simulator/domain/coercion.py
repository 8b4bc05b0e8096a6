"""Input boundary - parse-with-fallback for bill records coming from forms or extraction.

Permissive mode silently masks invalid input: every numeric field that is
missing, non-numeric, non-finite, boolean or negative becomes 0, and an
unknown connection class falls back to the policy's fallback class. Strict
mode parses the same way but reports every offending field instead.
"""

import math
from typing import Any, Dict, Mapping, Optional

from envecom_simulator.domain.exceptions import InvalidBillInputError
from envecom_simulator.domain.models import BillInput, ConnectionType, TariffPolicy, DEFAULT_POLICY

# Wire key -> BillInput attribute
NUMERIC_FIELDS = {
    "consumo_total_kwh": "total_kwh",
    "tarifa_te": "te_rate",
    "tarifa_tusd": "tusd_rate",
    "tarifa_bandeira_amarela": "yellow_flag_rate",
    "tarifa_bandeira_vermelha": "red_flag_rate",
    "iluminacao_publica": "public_lighting_fee",
}

TEXT_FIELDS = {
    "nome": "client_name",
    "uc": "consumer_unit",
    "distribuidora": "distributor",
    "mes_ref": "reference_month",
    "outros_itens_texto": "notes",
}

REQUIRED_TEXT_FIELDS = ("nome", "uc")

CONNECTION_FIELD = "tipo_ligacao"

CONNECTION_ALIASES = {
    "mono": ConnectionType.MONO,
    "monofasica": ConnectionType.MONO,
    "monofásica": ConnectionType.MONO,
    "single-phase": ConnectionType.MONO,
    "bi": ConnectionType.BI,
    "bifasica": ConnectionType.BI,
    "bifásica": ConnectionType.BI,
    "two-phase": ConnectionType.BI,
    "tri": ConnectionType.TRI,
    "trifasica": ConnectionType.TRI,
    "trifásica": ConnectionType.TRI,
    "three-phase": ConnectionType.TRI,
}


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a non-negative finite number, or return None when it is not one.

    Accepts ints, floats and numeric strings with either decimal separator
    ("0,32766", "1.234,56", "1,234.56"). When both separators appear, the
    last one is the decimal point. Several commas without a dot are
    ambiguous and rejected.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace("R$", "").replace(" ", "")
        if not text:
            return None
        if "," in text and "." in text:
            if text.rfind(",") > text.rfind("."):
                text = text.replace(".", "").replace(",", ".")
            else:
                text = text.replace(",", "")
        elif "," in text:
            if text.count(",") > 1:
                return None
            text = text.replace(",", ".")
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number) or number < 0:
        return None
    return number


def parse_number_or_zero(value: Any) -> float:
    """Parse with fallback: anything that is not a valid number becomes 0"""
    number = parse_number(value)
    return number if number is not None else 0.0


def parse_connection(value: Any) -> Optional[ConnectionType]:
    """Map a connection class label to ConnectionType, None if unknown"""
    if isinstance(value, ConnectionType):
        return value
    if not isinstance(value, str):
        return None
    return CONNECTION_ALIASES.get(value.strip().lower())


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def bill_input_from_mapping(
    data: Mapping[str, Any],
    strict: bool = False,
    policy: TariffPolicy = DEFAULT_POLICY,
) -> BillInput:
    """
    Build a BillInput from a wire-keyed record.

    Raises:
        InvalidBillInputError: Only in strict mode, listing every bad field
    """
    errors: Dict[str, str] = {}
    values: Dict[str, Any] = {}

    for key, attr in TEXT_FIELDS.items():
        values[attr] = _text(data.get(key))

    for key, attr in NUMERIC_FIELDS.items():
        raw = data.get(key)
        number = parse_number(raw)
        if number is None:
            if strict and not _is_blank(raw):
                errors[key] = f"esperado um número não negativo, recebido {raw!r}"
            number = 0.0
        values[attr] = number

    raw_connection = data.get(CONNECTION_FIELD)
    connection = parse_connection(raw_connection)
    if connection is None:
        if strict:
            errors[CONNECTION_FIELD] = f"tipo de ligação desconhecido: {raw_connection!r}"
        connection = policy.fallback_connection
    values["connection"] = connection

    if strict:
        for key in REQUIRED_TEXT_FIELDS:
            if not values[TEXT_FIELDS[key]]:
                errors[key] = "campo obrigatório"

    if errors:
        raise InvalidBillInputError(errors)

    return BillInput(**values)


def normalize_extracted(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Reduce an extraction payload to the known wire keys it actually carries.

    Numeric values are coerced with fallback to 0, text values are stripped,
    unknown keys are dropped and absent keys stay absent.
    """
    partial: Dict[str, Any] = {}
    for key in TEXT_FIELDS:
        if key in data and data[key] is not None:
            partial[key] = _text(data[key])
    for key in NUMERIC_FIELDS:
        if key in data:
            partial[key] = parse_number_or_zero(data[key])
    connection = parse_connection(data.get(CONNECTION_FIELD))
    if connection is not None:
        partial[CONNECTION_FIELD] = connection.value
    return partial
