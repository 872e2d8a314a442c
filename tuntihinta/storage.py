from __future__ import annotations

import logging
from typing import Any

import boto3

from .config import PriceStoreConfig

logger = logging.getLogger(__name__)


class S3PriceStore:
    """Reads one price object per calendar day from an S3 bucket."""

    def __init__(self, config: PriceStoreConfig, client: Any | None = None) -> None:
        self.config = config
        self.client = client if client is not None else _create_client(config)

    def object_key(self, day: str) -> str:
        return f"{day}{self.config.key_suffix}"

    def fetch_day(self, day: str) -> bytes:
        key = self.object_key(day)
        logger.debug("Fetching s3://%s/%s", self.config.bucket, key)
        response = self.client.get_object(Bucket=self.config.bucket, Key=key)
        return response["Body"].read()


def _create_client(config: PriceStoreConfig) -> Any:
    return boto3.client(
        "s3",
        region_name=config.region,
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        api_version="2006-03-01",
    )
