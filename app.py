from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from tuntihinta.aggregates import compute_month_aggregates
from tuntihinta.config import ConfigurationError, PriceStoreConfig
from tuntihinta.consumption import ConsumptionFileError, parse_consumption_upload
from tuntihinta.models import PriceRecord, PriceTable
from tuntihinta.prices import FetchFailure, load_price_records
from tuntihinta.reporting import build_report

MAX_UPLOAD_MB = 10

logger = logging.getLogger(__name__)

app = Flask(__name__, static_folder=None)
app.config["MAX_CONTENT_LENGTH"] = MAX_UPLOAD_MB * 1024 * 1024
app.config["PRICE_RECORDS"] = None
app.config["PRICE_STORE_CONFIG"] = None


@app.get("/api/prices")
def prices() -> object:
    try:
        records = _price_records()
    except (FetchFailure, ConfigurationError) as exc:
        return _prices_unavailable(exc)
    return jsonify(
        {"prices": [{"hour": record.hour, "price": record.price} for record in records]}
    )


@app.post("/api/upload")
def upload() -> object:
    if "file" not in request.files:
        return jsonify({"error": "Tiedostoa ei vastaanotettu."}), 400
    file = request.files["file"]
    if not file.filename:
        return jsonify({"error": "Tiedostonimi puuttuu."}), 400

    try:
        consumption = parse_consumption_upload(file.read())
    except ConsumptionFileError as exc:
        return jsonify({"error": "Tiedoston luku epäonnistui.", "details": exc.user_message()}), 422
    except UnicodeDecodeError:
        return jsonify({"error": "Tiedosto ei ole UTF-8-muotoinen."}), 422

    try:
        table = PriceTable.from_records(_price_records())
    except (FetchFailure, ConfigurationError) as exc:
        return _prices_unavailable(exc)

    months = compute_month_aggregates(consumption, table)
    return jsonify({"months": build_report(months)})


@app.errorhandler(RequestEntityTooLarge)
def handle_file_too_large(_: RequestEntityTooLarge) -> object:
    return (
        jsonify({"error": f"Tiedosto on liian suuri. Enintään {MAX_UPLOAD_MB} MB."}),
        413,
    )


def _price_records() -> list[PriceRecord]:
    records = app.config["PRICE_RECORDS"]
    if records is None:
        config = app.config["PRICE_STORE_CONFIG"] or PriceStoreConfig.from_env()
        records = load_price_records(config)
        app.config["PRICE_RECORDS"] = records
    return records


def _prices_unavailable(exc: Exception) -> object:
    logger.error("Price data unavailable: %s", exc)
    return jsonify({"error": "Hintatietoja ei saatu haettua.", "details": str(exc)}), 503


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app.run(host="0.0.0.0", port=5000, debug=True)
