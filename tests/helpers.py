"""Builders for datahub export text and price objects, plus an in-memory S3 client."""

import io
import json
import threading

from tuntihinta.consumption import EXPECTED_HEADER

HEADER_LINE = ";".join(EXPECTED_HEADER)


def export_row(hour: str, quantity: str) -> str:
    return ";".join(["643000000000000001", "8716867000030", "PT1H", "kWh", hour, quantity, "OK"])


def price_body(*entries: tuple[str, float]) -> bytes:
    return json.dumps(
        {"hourPrices": [{"startTime": hour, "price": price} for hour, price in entries]}
    ).encode("utf-8")


class FakeS3Client:
    """Answers ``get_object`` from a dict of key -> body; unknown keys raise."""

    def __init__(self, objects: dict[str, bytes]) -> None:
        self.objects = objects
        self.requested: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def get_object(self, Bucket: str, Key: str) -> dict:
        with self._lock:
            self.requested.append((Bucket, Key))
        if Key not in self.objects:
            raise KeyError(f"NoSuchKey: {Key}")
        return {"Body": io.BytesIO(self.objects[Key])}
