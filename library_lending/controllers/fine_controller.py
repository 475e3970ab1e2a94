# library_lending/controllers/fine_controller.py

from flask import Blueprint, jsonify, request

from library_lending.services.fine_service import FineService

fine_bp = Blueprint("fines", __name__)


def _fine_json(f):
    b = f.borrow
    return {
        "borrow_id": f.borrow_id,
        "amount": float(f.amount),
        "is_paid": bool(f.is_paid),
        "reader_id": b.reader_id if b else None,
        "book_id": b.book_id if b else None,
        "due_date": b.due_date.isoformat() if b else None,
        "return_date": b.return_date.isoformat() if b and b.return_date else None,
    }


@fine_bp.get("/", strict_slashes=False)
def list_fines():
    only_unpaid = request.args.get("only_unpaid", "0") == "1"
    rows = FineService.list_fines(only_unpaid=only_unpaid)
    return jsonify({"success": True, "data": [_fine_json(f) for f in rows]})


@fine_bp.post("/pay/<int:borrow_id>")
def pay_fine(borrow_id: int):
    f = FineService.pay_fine(borrow_id)
    return jsonify({"success": True, "data": _fine_json(f)})
