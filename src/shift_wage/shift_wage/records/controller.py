from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import parse_local_datetime
from ..common.validators import optional_text, require_non_empty, require_rate
from ..container import Container
from ..core.constants import CSV_FILENAME
from ..core.exceptions import ComputationInvariantViolation, NotFoundError, ValidationError
from ..export.csv_exporter import encode_csv, render_records_csv

logger = logging.getLogger(__name__)


def _parse_breaks(raw) -> list[tuple]:
    """Break rows from the form; rows with both fields blank are ignored."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValidationError("breaks phải là danh sách", field="breaks")

    pairs = []
    for i, item in enumerate(raw):
        field_name = f"breaks[{i}]"
        if not isinstance(item, dict):
            raise ValidationError(f"{field_name} không hợp lệ", field=field_name)
        start_s = optional_text(item.get("start"), f"{field_name}.start")
        end_s = optional_text(item.get("end"), f"{field_name}.end")
        if not start_s and not end_s:
            continue
        if not start_s or not end_s:
            raise ValidationError(f"{field_name}: cần nhập cả giờ bắt đầu và kết thúc", field=field_name)
        pairs.append(
            (
                parse_local_datetime(start_s, f"{field_name}.start"),
                parse_local_datetime(end_s, f"{field_name}.end"),
            )
        )
    return pairs


def _error(message: str, status: int, *, field=None):
    body = {"success": False, "message": message}
    if field:
        body["field"] = field
    return jsonify(body), status


def register(app: Flask, container: Container) -> None:
    service = container.record_service

    @app.route("/records", methods=["POST"], endpoint="records_create")
    def records_create():
        try:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                raise ValidationError("Dữ liệu JSON không hợp lệ")

            record = service.submit(
                work_start=parse_local_datetime(require_non_empty(data.get("work_start"), "work_start"), "work_start"),
                work_end=parse_local_datetime(require_non_empty(data.get("work_end"), "work_end"), "work_end"),
                breaks=_parse_breaks(data.get("breaks")),
                hourly_rate=require_rate(data.get("hourly_rate")),
            )
            return jsonify({"success": True, "id": record.record_id, "record": record.as_dict()}), 201
        except ValidationError as e:
            return _error(str(e), 400, field=e.field)
        except ComputationInvariantViolation:
            logger.exception("Wage engine postcondition failed")
            return _error("Lỗi hệ thống khi tính lương", 500)

    @app.route("/records", methods=["GET"], endpoint="records_list")
    def records_list():
        records = service.list_records()
        totals = service.totals(records)
        return jsonify({"records": [r.as_dict() for r in records], "totals": totals.as_dict()})

    @app.route("/records/<int:record_id>", methods=["DELETE"], endpoint="records_delete")
    def records_delete(record_id: int):
        try:
            service.delete(record_id)
        except NotFoundError as e:
            return _error(str(e), 404)
        return jsonify({"success": True})

    @app.route("/records/csv", methods=["GET"], endpoint="records_csv")
    def records_csv():
        records = service.list_records()
        payload = encode_csv(render_records_csv(records, service.totals(records)))
        return send_file(
            io.BytesIO(payload),
            mimetype="text/csv",
            as_attachment=True,
            download_name=CSV_FILENAME,
        )
