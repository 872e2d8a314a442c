from __future__ import annotations

import logging
import math
import pathlib
import re
from typing import List, Sequence

from .models import ConsumptionRecord

logger = logging.getLogger(__name__)

DELIMITER = ";"
EXPECTED_HEADER = (
    "Mittauspisteen tunnus",
    "Tuotteen tyyppi",
    "Resoluutio",
    "Yksikkötyyppi",
    "Alkuaika",
    "Määrä",
    "Laatu",
)
START_TIME_COLUMN = 4
QUANTITY_COLUMN = 5


class ConsumptionFileError(Exception):
    """A consumption export that cannot be turned into records."""

    def user_message(self) -> str:
        return str(self)


class SchemaMismatch(ConsumptionFileError):
    def __init__(self, headers: Sequence[str]) -> None:
        self.headers = list(headers)
        super().__init__(f"Outoja sarakkeita: {', '.join(self.headers)}")


class InvalidQuantity(ConsumptionFileError):
    def __init__(self, row: int, raw: str) -> None:
        self.row = row
        self.raw = raw
        super().__init__(f"Virheellinen määrä rivillä {row}: {raw!r}")


def read_consumption_csv(path: str | pathlib.Path) -> List[ConsumptionRecord]:
    """Read a datahub consumption export from disk."""

    return parse_consumption_upload(pathlib.Path(path).read_bytes())


def parse_consumption_upload(file_bytes: bytes) -> List[ConsumptionRecord]:
    return parse_consumption_text(file_bytes.decode("utf-8-sig"))


def parse_consumption_text(text: str) -> List[ConsumptionRecord]:
    """Parse the text of a datahub hourly consumption export.

    The header must match ``EXPECTED_HEADER`` exactly, otherwise
    ``SchemaMismatch`` is raised. Only the start time and quantity columns
    are read. Rows where either is empty are skipped without notice, and a
    quantity that is not a number raises ``InvalidQuantity``.
    """

    # Plain splitting, no CSV quoting: a quote is an ordinary character.
    lines = re.split(r"\r?\n", text)
    header = lines[0].split(DELIMITER)
    if tuple(header) != EXPECTED_HEADER:
        raise SchemaMismatch(header)

    records: List[ConsumptionRecord] = []
    dropped = 0
    for index, line in enumerate(lines[1:], start=2):
        row = line.split(DELIMITER)
        hour = _field(row, START_TIME_COLUMN)
        raw_quantity = _field(row, QUANTITY_COLUMN)
        if not hour or not raw_quantity:
            dropped += 1
            continue
        records.append(
            ConsumptionRecord(hour=hour, kwh=_parse_quantity(raw_quantity, index))
        )

    logger.debug("Parsed %d consumption rows, skipped %d", len(records), dropped)
    return records


def _field(row: Sequence[str], index: int) -> str:
    if index >= len(row):
        return ""
    return row[index]


def _parse_quantity(raw: str, row: int) -> float:
    # Decimal comma in the export.
    cleaned = raw.replace(",", ".", 1)
    try:
        value = float(cleaned)
    except ValueError as exc:
        raise InvalidQuantity(row, raw) from exc
    if not math.isfinite(value):
        raise InvalidQuantity(row, raw)
    return value
