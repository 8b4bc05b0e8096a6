"""Accumulated-saving projection for the report dashboard"""

from typing import Iterator, List

PROJECTION_MONTHS = 12


def iter_monthly_projection(member_share: float, months: int = PROJECTION_MONTHS) -> Iterator[float]:
    """Yield the accumulated saving at the end of each month"""
    for month in range(1, months + 1):
        yield member_share * month


def monthly_projection(member_share: float, months: int = PROJECTION_MONTHS) -> List[float]:
    return list(iter_monthly_projection(member_share, months))


def annual_saving(member_share: float) -> float:
    """Total saving after one year, the last projection point"""
    return monthly_projection(member_share)[-1]
