from __future__ import annotations

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Protocol, Sequence, Tuple
from zoneinfo import ZoneInfo

from .config import PriceStoreConfig
from .models import PriceRecord
from .storage import S3PriceStore

logger = logging.getLogger(__name__)

PriceBundle = List[Tuple[str, float]]

REDUCED_VAT_MULTIPLIER = 1.10
STANDARD_VAT_MULTIPLIER = 1.24
# Temporary 10 % VAT on electricity, compared as strings against UTC hour keys.
# The end literal is kept as published even though April has 30 days; it sorts
# after every hour of 2023-04-30 and before 2023-05-01.
REDUCED_VAT_START = "2022-11-30T22:00:00Z"
REDUCED_VAT_END = "2023-04-31T22:00:00Z"


class PriceSource(Protocol):
    def fetch_day(self, day: str) -> bytes: ...


class FetchFailure(Exception):
    """One or more daily price objects could not be read.

    ``failures`` holds a ``(day, reason)`` pair for every failed day.
    """

    def __init__(self, failures: Sequence[Tuple[str, str]]) -> None:
        self.failures = list(failures)
        days = ", ".join(day for day, _ in self.failures[:5])
        if len(self.failures) > 5:
            days += ", ..."
        super().__init__(
            f"Failed to fetch price data for {len(self.failures)} day(s): {days}"
        )


def tax_multiplier(hour: str) -> float:
    if REDUCED_VAT_START <= hour <= REDUCED_VAT_END:
        return REDUCED_VAT_MULTIPLIER
    return STANDARD_VAT_MULTIPLIER


def parse_price_bundle(body: bytes | str) -> PriceBundle:
    """Read the ``(startTime, price)`` pairs of one daily price object."""

    document = json.loads(body)
    if not isinstance(document, dict) or not isinstance(document.get("hourPrices"), list):
        raise ValueError("Price object has no hourPrices list.")

    bundle: PriceBundle = []
    for entry in document["hourPrices"]:
        start_time = entry.get("startTime") if isinstance(entry, dict) else None
        if not isinstance(start_time, str):
            raise ValueError(f"Price entry without startTime: {entry!r}")
        bundle.append((start_time, float(entry["price"])))
    return bundle


def build_price_records(bundles: Iterable[PriceBundle]) -> List[PriceRecord]:
    """Flatten daily bundles into tax-adjusted price records, order preserved."""

    return [
        PriceRecord(hour=hour, price=raw_price * tax_multiplier(hour))
        for bundle in bundles
        for hour, raw_price in bundle
    ]


def price_dates(epoch: date, today: date) -> List[str]:
    """ISO dates from ``epoch`` up to, but not including, ``today``."""

    count = max(0, (today - epoch).days)
    return [(epoch + timedelta(days=offset)).isoformat() for offset in range(count)]


def fetch_price_records(
    source: PriceSource,
    days: Sequence[str],
    *,
    max_workers: int = 16,
) -> List[PriceRecord]:
    """Read and parse every day concurrently, then build the price records.

    Every read is allowed to finish before any outcome is inspected. If one
    or more days failed, ``FetchFailure`` lists all of them and no records
    are returned.
    """

    futures: Dict[Future, str] = {}
    with ThreadPoolExecutor(
        max_workers=max(1, max_workers), thread_name_prefix="price-fetch"
    ) as executor:
        for day in days:
            futures[executor.submit(_read_bundle, source, day)] = day
    # Leaving the block waits for every submitted read.

    bundles: List[PriceBundle] = []
    failures: List[Tuple[str, str]] = []
    for future, day in futures.items():
        error = future.exception()
        if error is not None:
            logger.error("Price data for %s unavailable: %s", day, error)
            failures.append((day, str(error) or type(error).__name__))
        else:
            bundles.append(future.result())

    if failures:
        raise FetchFailure(failures)

    records = build_price_records(bundles)
    logger.info("Built %d hourly prices from %d days", len(records), len(bundles))
    return records


def load_price_records(
    config: PriceStoreConfig,
    source: PriceSource | None = None,
    *,
    today: date | None = None,
) -> List[PriceRecord]:
    if source is None:
        source = S3PriceStore(config)
    if today is None:
        today = datetime.now(ZoneInfo(config.timezone)).date()
    days = price_dates(config.epoch, today)
    return fetch_price_records(source, days, max_workers=config.max_workers)


def _read_bundle(source: PriceSource, day: str) -> PriceBundle:
    return parse_price_bundle(source.fetch_day(day))
