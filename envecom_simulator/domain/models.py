"""Domain models - immutable dataclasses for bill inputs and compensation reports"""

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class ConnectionType(str, Enum):
    """Grid connection class of the consumer unit"""

    MONO = "mono"  # single-phase
    BI = "bi"  # two-phase
    TRI = "tri"  # three-phase


@dataclass(frozen=True)
class TariffPolicy:
    """Regulatory parameters used by the compensation calculator"""

    minimum_floors_kwh: Mapping[ConnectionType, float] = field(
        default_factory=lambda: MappingProxyType(
            {
                ConnectionType.MONO: 30,
                ConnectionType.BI: 50,
                ConnectionType.TRI: 100,
            }
        )
    )
    tusd_credit_factor: float = 0.8  # 20% ICMS deduction on TUSD
    member_share: float = 0.20
    association_share: float = 0.80
    fallback_connection: ConnectionType = ConnectionType.TRI

    def __post_init__(self):
        if not math.isclose(self.member_share + self.association_share, 1.0):
            raise ValueError("member_share and association_share must add up to 1")

    def floor_for(self, connection: ConnectionType) -> float:
        """Minimum billable consumption for a connection class"""
        if connection in self.minimum_floors_kwh:
            return self.minimum_floors_kwh[connection]
        return self.minimum_floors_kwh[self.fallback_connection]


DEFAULT_POLICY = TariffPolicy()


@dataclass(frozen=True)
class BillInput:
    """Normalized electric bill parameters"""

    client_name: str = ""
    consumer_unit: str = ""
    distributor: str = ""
    reference_month: str = ""
    connection: ConnectionType = DEFAULT_POLICY.fallback_connection
    total_kwh: float = 0.0
    te_rate: float = 0.0
    tusd_rate: float = 0.0
    yellow_flag_rate: float = 0.0
    red_flag_rate: float = 0.0
    public_lighting_fee: float = 0.0
    notes: str = ""


@dataclass(frozen=True)
class Identification:
    client_name: str
    consumer_unit: str
    distributor: str
    reference_month: str
    connection: ConnectionType


@dataclass(frozen=True)
class Consumption:
    total_kwh: float
    minimum_kwh: float
    compensable_kwh: float


@dataclass(frozen=True)
class LineItem:
    """One compensated tariff component"""

    label: str
    compensable_kwh: float
    unit_rate: float
    value: float


@dataclass(frozen=True)
class Summary:
    credit_total: float
    member_share: float  # monthly saving of the associate
    association_share: float
    reduction_pct: float  # rounded to 2 decimals


@dataclass(frozen=True)
class Comparison:
    current_invoice: float
    new_final_total: float


@dataclass(frozen=True)
class CompensationReport:
    """Output of a compensation simulation"""

    identification: Identification
    consumption: Consumption
    line_items: Tuple[LineItem, ...]
    summary: Summary
    comparison: Comparison
