from flask import Blueprint, request, jsonify
from library_lending.services.reader_service import ReaderService
from library_lending.services.report_service import ReportService
from library_lending.utils.dates import parse_date

reader_bp = Blueprint("readers", __name__)


def _reader_json(r):
    return {
        "reader_id": r.reader_id,
        "reader_name": r.reader_name,
        "register_date": r.register_date.isoformat() if r.register_date else None,
    }


@reader_bp.get("/", strict_slashes=False)
def list_readers():
    return jsonify({"success": True, "data": [_reader_json(r) for r in ReaderService.list_readers()]})


@reader_bp.get("/<int:reader_id>")
def get_reader(reader_id: int):
    return jsonify({"success": True, "data": _reader_json(ReaderService.get_reader(reader_id))})


@reader_bp.post("/", strict_slashes=False)
def create_reader():
    data = request.get_json(silent=True) or {}
    r = ReaderService.register_reader(
        data.get("reader_name"),
        register_date=parse_date(data.get("register_date"), "register_date"),
    )
    return jsonify({"success": True, "data": _reader_json(r)}), 201


@reader_bp.delete("/<int:reader_id>")
def delete_reader(reader_id: int):
    ReaderService.delete_reader(reader_id)
    return jsonify({"success": True})


@reader_bp.get("/<int:reader_id>/history")
def reader_history(reader_id: int):
    rows = ReportService.reader_history(reader_id)
    return jsonify({"success": True, "data": [
        {
            "book_title": title,
            "borrow_date": borrowed.isoformat(),
            "return_date": returned.isoformat() if returned else None,
        } for title, borrowed, returned in rows
    ]})
