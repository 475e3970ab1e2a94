
from flask import Blueprint, jsonify, request

from library_lending.services.consistency_engine import ConsistencyEngine
from library_lending.services.report_service import ReportService
from library_lending.utils.dates import parse_date

report_bp = Blueprint("reports", __name__)


@report_bp.get("/overdue")
def overdue():
    today = parse_date(request.args.get("today"), "today")
    rows = ReportService.list_overdue(today)
    return jsonify({"success": True, "data": [
        {
            "borrow_id": b.borrow_id,
            "reader_id": b.reader_id,
            "reader_name": b.reader.reader_name if b.reader else None,
            "book_id": b.book_id,
            "book_title": b.book.book_title if b.book else None,
            "borrow_date": b.borrow_date.isoformat(),
            "due_date": b.due_date.isoformat(),
        } for b in rows
    ]})


@report_bp.get("/top-books")
def top_books():
    n = request.args.get("n", type=int)
    rows = ReportService.top_borrowed_books(n)
    return jsonify({"success": True, "data": [
        {"book_id": book_id, "borrow_count": count} for book_id, count in rows
    ]})


@report_bp.get("/hot-books")
def hot_books():
    return jsonify({"success": True, "data": [
        {"book_id": book_id, "book_title": title, "borrow_count": count}
        for book_id, title, count in ReportService.hot_books()
    ]})


@report_bp.get("/reader-counts")
def reader_counts():
    return jsonify({"success": True, "data": [
        {"reader_name": name, "total_borrowed": count}
        for name, count in ReportService.reader_borrow_counts()
    ]})


@report_bp.get("/consistency")
def consistency():
    mismatches = ConsistencyEngine.audit()
    return jsonify({"success": True, "consistent": not mismatches, "data": mismatches})
