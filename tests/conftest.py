"""Shared fixtures: a datahub export and small consumption and price datasets."""

import pytest

from tuntihinta.models import ConsumptionRecord, PriceRecord

from .helpers import HEADER_LINE, export_row


@pytest.fixture
def export_text() -> str:
    return "\r\n".join(
        [
            HEADER_LINE,
            export_row("2023-01-10T10:00:00Z", "2,0"),
            export_row("2023-01-10T11:00:00Z", "3,0"),
            export_row("2023-01-11T10:00:00Z", "1,5"),
            "",
        ]
    )


@pytest.fixture
def consumption() -> list[ConsumptionRecord]:
    return [
        ConsumptionRecord("2023-01-10T10:00:00Z", 2.0),
        ConsumptionRecord("2023-01-10T11:00:00Z", 3.0),
        ConsumptionRecord("2023-01-11T10:00:00Z", 1.0),
        ConsumptionRecord("2023-01-12T10:00:00Z", 4.0),
        ConsumptionRecord("2023-02-01T00:00:00Z", 1.0),
    ]


@pytest.fixture
def prices() -> list[PriceRecord]:
    return [
        PriceRecord("2023-01-10T10:00:00Z", 10.0),
        PriceRecord("2023-01-10T11:00:00Z", 20.0),
        PriceRecord("2023-01-11T10:00:00Z", 5.0),
        PriceRecord("2023-03-01T00:00:00Z", 7.0),
    ]
