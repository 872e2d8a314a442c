from __future__ import annotations

from typing import Dict, Iterable, List

from .models import DayAggregate, MonthAggregate

NO_DATA = "ei tietoja"


def build_month_report(aggregate: MonthAggregate) -> Dict[str, object]:
    """Display-ready view of a month. Costs are in cents, shown in euros."""

    cents_per_kwh = aggregate.average_cost_per_kwh
    kwh_per_day = aggregate.average_kwh_per_day
    return {
        "month": aggregate.month,
        "day_count": aggregate.day_count,
        "total_kwh": round(aggregate.total_kwh, 2),
        "total_cost_eur": round(aggregate.total_cost / 100.0, 2),
        "cents_per_kwh": _round_or_none(cents_per_kwh),
        "kwh_per_day": _round_or_none(kwh_per_day),
        "display": {
            "cents_per_kwh": format_cents_per_kwh(cents_per_kwh),
            "kwh_per_day": format_kwh_per_day(kwh_per_day),
            "total_kwh": f"{aggregate.total_kwh:.0f} kWh",
            "total_cost": format_euros(aggregate.total_cost),
        },
        "cheapest_day": _format_day(aggregate.min_cost_day),
        "most_expensive_day": _format_day(aggregate.max_cost_day),
        "lowest_consumption_day": _format_day(aggregate.min_kwh_day),
        "highest_consumption_day": _format_day(aggregate.max_kwh_day),
    }


def build_report(aggregates: Iterable[MonthAggregate]) -> List[Dict[str, object]]:
    return [build_month_report(aggregate) for aggregate in aggregates]


def format_euros(cents: float | None) -> str:
    if cents is None:
        return NO_DATA
    return f"{cents / 100.0:.2f} €"


def format_cents_per_kwh(value: float | None) -> str:
    if value is None:
        return NO_DATA
    return f"{value:.2f} c/kWh"


def format_kwh(value: float | None) -> str:
    if value is None:
        return NO_DATA
    return f"{value:.2f} kWh"


def format_kwh_per_day(value: float | None) -> str:
    if value is None:
        return NO_DATA
    return f"{value:.2f} kWh/vrk"


def _format_day(day: DayAggregate | None) -> Dict[str, object] | None:
    if day is None:
        return None
    return {
        "day": day.day,
        "kwh": round(day.kwh, 2),
        "cost_eur": round(day.cost / 100.0, 2),
        "cents_per_kwh": _round_or_none(day.cost_per_kwh),
        "display": {
            "kwh": format_kwh(day.kwh),
            "cost": format_euros(day.cost),
            "cents_per_kwh": format_cents_per_kwh(day.cost_per_kwh),
        },
    }


def _round_or_none(value: float | None, digits: int = 2) -> float | None:
    if value is None:
        return None
    return round(value, digits)
