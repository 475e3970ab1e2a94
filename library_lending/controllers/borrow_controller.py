from flask import Blueprint, request, jsonify
from library_lending.services.borrow_service import BorrowService
from library_lending.utils.dates import parse_datetime

borrow_bp = Blueprint("borrow", __name__)


def _borrow_json(x):
    return {
        "borrow_id": x.borrow_id,
        "reader_id": x.reader_id,
        "book_id": x.book_id,
        "book_title": x.book.book_title if x.book else None,
        "borrow_date": x.borrow_date.isoformat(),
        "due_date": x.due_date.isoformat(),
        "return_date": x.return_date.isoformat() if x.return_date else None,
    }


@borrow_bp.post("/", strict_slashes=False)
def borrow_book():
    data = request.get_json(silent=True) or {}
    try:
        reader_id = int(data["reader_id"])
        book_id = int(data["book_id"])
    except KeyError:
        return jsonify({"success": False, "message": "reader_id and book_id are required"}), 400
    except (TypeError, ValueError):
        return jsonify({"success": False, "message": "reader_id and book_id must be integers"}), 400

    borrow_id = BorrowService.borrow_book(
        reader_id,
        book_id,
        borrow_date=parse_datetime(data.get("borrow_date"), "borrow_date"),
        due_date=parse_datetime(data.get("due_date"), "due_date"),
    )
    b = BorrowService.get_borrow(borrow_id)
    return jsonify({"success": True, "borrow_id": borrow_id, "due_date": b.due_date.isoformat()}), 201


@borrow_bp.post("/return/<int:borrow_id>")
def return_book(borrow_id):
    data = request.get_json(silent=True) or {}
    result = BorrowService.return_book(
        borrow_id,
        parse_datetime(data.get("return_date"), "return_date"),
    )
    return jsonify({
        "success": True,
        "borrow_id": result["borrow_id"],
        "return_date": result["return_date"].isoformat(),
        "fine_amount": result["fine_amount"],
    })


@borrow_bp.get("/", strict_slashes=False)
def list_borrows():
    reader_id = request.args.get("reader_id", type=int)
    borrows = BorrowService.list_borrows(reader_id)
    return jsonify({"success": True, "data": [_borrow_json(x) for x in borrows]})


@borrow_bp.get("/<int:borrow_id>")
def get_borrow(borrow_id: int):
    return jsonify({"success": True, "data": _borrow_json(BorrowService.get_borrow(borrow_id))})
