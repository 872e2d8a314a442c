from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class ConsumptionRecord:
    """Consumption for one hour, keyed by the hour string of the export."""

    hour: str
    kwh: float


@dataclass(frozen=True)
class PriceRecord:
    """Tax-adjusted spot price for one hour, in cents per kWh."""

    hour: str
    price: float


@dataclass(frozen=True)
class DayAggregate:
    """Consumption and cost for one calendar day."""

    day: str
    kwh: float
    cost: float

    @property
    def cost_per_kwh(self) -> float | None:
        if self.kwh == 0:
            return None
        return self.cost / self.kwh


@dataclass(frozen=True)
class MonthAggregate:
    """Totals and extreme days for one calendar month.

    ``day_count`` counts the days that were aggregated, i.e. days with both
    consumption and price data, not the length of the month.
    """

    month: str
    day_count: int
    total_kwh: float
    total_cost: float
    max_kwh_day: DayAggregate | None = None
    max_cost_day: DayAggregate | None = None
    min_kwh_day: DayAggregate | None = None
    min_cost_day: DayAggregate | None = None

    @property
    def average_cost_per_kwh(self) -> float | None:
        if self.total_kwh == 0:
            return None
        return self.total_cost / self.total_kwh

    @property
    def average_kwh_per_day(self) -> float | None:
        if self.total_kwh == 0 or self.day_count == 0:
            return None
        return self.total_kwh / self.day_count


@dataclass(frozen=True)
class PriceTable:
    """Lookup table for prices keyed by hour.

    When the same hour appears more than once, the first record wins.
    """

    records: Tuple[PriceRecord, ...]
    prices: Dict[str, PriceRecord]

    def get(self, hour: str) -> PriceRecord | None:
        return self.prices.get(hour)

    def __len__(self) -> int:
        return len(self.records)

    def days(self) -> set[str]:
        return {day_key(hour) for hour in self.prices}

    def months(self) -> set[str]:
        return {month_key(hour) for hour in self.prices}

    @classmethod
    def from_records(cls, records: Iterable[PriceRecord]) -> "PriceTable":
        ordered: List[PriceRecord] = list(records)
        prices: Dict[str, PriceRecord] = {}
        for record in ordered:
            prices.setdefault(record.hour, record)
        return cls(tuple(ordered), prices)


def day_key(hour: str) -> str:
    """Return the calendar day of an hour key, e.g. ``2023-01-10``.

    Hour keys are fixed-width ISO-8601 timestamps, so the first ten
    characters are exactly the date.
    """

    return hour[:10]


def month_key(hour: str) -> str:
    """Return the calendar month of an hour key, e.g. ``2023-01``."""

    return hour[:7]
