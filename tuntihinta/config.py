from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from typing import Mapping

PRICE_EPOCH = date(2022, 1, 1)
PRICE_TIMEZONE = "Europe/Helsinki"
OBJECT_KEY_SUFFIX = ".json"
MAX_FETCH_WORKERS = 16


class ConfigurationError(Exception):
    pass


@dataclass(frozen=True)
class PriceStoreConfig:
    """Where and how the daily price objects are read."""

    bucket: str
    region: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    epoch: date = PRICE_EPOCH
    key_suffix: str = OBJECT_KEY_SUFFIX
    timezone: str = PRICE_TIMEZONE
    max_workers: int = MAX_FETCH_WORKERS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PriceStoreConfig":
        env = os.environ if environ is None else environ
        bucket = (env.get("TH_AWS_BUCKET") or "").strip()
        if not bucket:
            raise ConfigurationError("TH_AWS_BUCKET is not set.")
        return cls(
            bucket=bucket,
            region=env.get("TH_AWS_REGION") or None,
            access_key_id=env.get("TH_AWS_ACCESS_KEY_ID") or None,
            secret_access_key=env.get("TH_AWS_SECRET_ACCESS_KEY") or None,
        )
