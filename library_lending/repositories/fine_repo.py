from library_lending.models.fine import Fine
from library_lending.extensions import db

class FineRepo:
    @staticmethod
    def get(borrow_id: int):
        return db.session.get(Fine, borrow_id)

    @staticmethod
    def list_all(only_unpaid: bool = False):
        q = Fine.query
        if only_unpaid:
            q = q.filter(Fine.is_paid.is_(False))
        return q.order_by(Fine.borrow_id).all()

    @staticmethod
    def add(fine: Fine):
        # no commit: created inside the return workflow transaction
        db.session.add(fine)
        db.session.flush()
        return fine

    @staticmethod
    def commit():
        db.session.commit()
