"""Deterministic pt-BR number formatting for report rendering"""

from envecom_simulator.domain.models import ConnectionType

CONNECTION_LABELS = {
    ConnectionType.MONO: "Monofásica",
    ConnectionType.BI: "Bifásica",
    ConnectionType.TRI: "Trifásica",
}


def format_decimal(value: float, places: int) -> str:
    """Format with pt-BR separators: 1234.5 -> '1.234,50'"""
    text = f"{abs(value):,.{places}f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"-{text}" if round(value, places) < 0 else text


def format_currency(value: float) -> str:
    """Currency with 2 decimals: 1234.5 -> 'R$ 1.234,50'"""
    text = format_decimal(value, 2)
    if text.startswith("-"):
        return f"-R$ {text[1:]}"
    return f"R$ {text}"


def format_tariff(value: float) -> str:
    """Unit tariff with 5 decimals: 0.497232 -> 'R$ 0,49723'"""
    return f"R$ {format_decimal(value, 5)}"


def format_kwh(value: float) -> str:
    """Consumption without trailing zeros: 158.0 -> '158 kWh'"""
    if float(value).is_integer():
        return f"{format_decimal(value, 0)} kWh"
    return f"{format_decimal(value, 2)} kWh"


def format_percentage(value: float) -> str:
    return f"{format_decimal(value, 2)}%"
