from __future__ import annotations

from typing import Iterable, List, Sequence

from .models import (
    ConsumptionRecord,
    DayAggregate,
    MonthAggregate,
    PriceRecord,
    PriceTable,
    day_key,
    month_key,
)

Prices = PriceTable | Sequence[PriceRecord]


def compute_day_aggregate(
    day: str,
    prices: Prices,
    consumption: Iterable[ConsumptionRecord],
) -> DayAggregate:
    """Join one day's consumption with hourly prices.

    Hours without a price still count towards kWh but add nothing to cost.
    """

    table = _ensure_table(prices)
    kwh = 0.0
    cost = 0.0
    for record in consumption:
        price = table.get(record.hour)
        kwh += record.kwh
        if price is not None:
            cost += record.kwh * price.price
    return DayAggregate(day=day, kwh=kwh, cost=cost)


def eligible_months(
    consumption: Iterable[ConsumptionRecord],
    prices: Prices,
) -> List[str]:
    """Months covered by both datasets, most recent first."""

    table = _ensure_table(prices)
    consumption_months = {month_key(record.hour) for record in consumption}
    return sorted(consumption_months & table.months(), reverse=True)


def eligible_days(
    month: str,
    consumption: Iterable[ConsumptionRecord],
    prices: Prices,
) -> List[str]:
    """Days of ``month`` with consumption, in file order, that also have prices."""

    table = _ensure_table(prices)
    days_with_prices = table.days()
    days = dict.fromkeys(
        day_key(record.hour)
        for record in consumption
        if month_key(record.hour) == month
    )
    return [day for day in days if day in days_with_prices]


def compute_month_aggregate(
    month: str,
    prices: Prices,
    consumption: Sequence[ConsumptionRecord],
) -> MonthAggregate:
    """Fold the eligible days of a month into totals and extreme days.

    Extremes start from the first day and are only replaced by a strictly
    larger (or smaller) value, so ties keep the earliest day seen.
    """

    table = _ensure_table(prices)
    total_kwh = 0.0
    total_cost = 0.0
    max_kwh_day: DayAggregate | None = None
    max_cost_day: DayAggregate | None = None
    min_kwh_day: DayAggregate | None = None
    min_cost_day: DayAggregate | None = None

    days = eligible_days(month, consumption, table)
    for day in days:
        aggregate = compute_day_aggregate(
            day, table, [record for record in consumption if day_key(record.hour) == day]
        )
        total_kwh += aggregate.kwh
        total_cost += aggregate.cost
        if max_kwh_day is None or aggregate.kwh > max_kwh_day.kwh:
            max_kwh_day = aggregate
        if max_cost_day is None or aggregate.cost > max_cost_day.cost:
            max_cost_day = aggregate
        if min_kwh_day is None or aggregate.kwh < min_kwh_day.kwh:
            min_kwh_day = aggregate
        if min_cost_day is None or aggregate.cost < min_cost_day.cost:
            min_cost_day = aggregate

    return MonthAggregate(
        month=month,
        day_count=len(days),
        total_kwh=total_kwh,
        total_cost=total_cost,
        max_kwh_day=max_kwh_day,
        max_cost_day=max_cost_day,
        min_kwh_day=min_kwh_day,
        min_cost_day=min_cost_day,
    )


def compute_month_aggregates(
    consumption: Sequence[ConsumptionRecord],
    prices: Prices,
) -> List[MonthAggregate]:
    table = _ensure_table(prices)
    return [
        compute_month_aggregate(month, table, consumption)
        for month in eligible_months(consumption, table)
    ]


def _ensure_table(prices: Prices) -> PriceTable:
    if isinstance(prices, PriceTable):
        return prices
    return PriceTable.from_records(prices)
