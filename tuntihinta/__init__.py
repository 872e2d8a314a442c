"""Hourly spot price comparison: consumption parsing, price tables, and monthly aggregates."""

from .aggregates import (
    compute_day_aggregate,
    compute_month_aggregate,
    compute_month_aggregates,
    eligible_days,
    eligible_months,
)
from .config import ConfigurationError, PriceStoreConfig
from .consumption import (
    ConsumptionFileError,
    InvalidQuantity,
    SchemaMismatch,
    parse_consumption_text,
    parse_consumption_upload,
    read_consumption_csv,
)
from .models import (
    ConsumptionRecord,
    DayAggregate,
    MonthAggregate,
    PriceRecord,
    PriceTable,
    day_key,
    month_key,
)
from .prices import (
    FetchFailure,
    build_price_records,
    fetch_price_records,
    load_price_records,
    tax_multiplier,
)
from .reporting import build_month_report, build_report
from .storage import S3PriceStore

__all__ = [
    "build_month_report",
    "build_price_records",
    "build_report",
    "compute_day_aggregate",
    "compute_month_aggregate",
    "compute_month_aggregates",
    "ConfigurationError",
    "ConsumptionFileError",
    "ConsumptionRecord",
    "day_key",
    "DayAggregate",
    "eligible_days",
    "eligible_months",
    "fetch_price_records",
    "FetchFailure",
    "InvalidQuantity",
    "load_price_records",
    "month_key",
    "MonthAggregate",
    "parse_consumption_text",
    "parse_consumption_upload",
    "PriceRecord",
    "PriceStoreConfig",
    "PriceTable",
    "read_consumption_csv",
    "S3PriceStore",
    "SchemaMismatch",
    "tax_multiplier",
]
