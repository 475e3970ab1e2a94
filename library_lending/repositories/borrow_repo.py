from datetime import datetime
from library_lending.models.borrow import BorrowRecord
from library_lending.extensions import db

class BorrowRepo:
    @staticmethod
    def get(borrow_id: int):
        return db.session.get(BorrowRecord, borrow_id)

    @staticmethod
    def list_by_reader(reader_id: int):
        return (
            BorrowRecord.query
            .filter_by(reader_id=reader_id)
            .order_by(BorrowRecord.borrow_date, BorrowRecord.borrow_id)
            .all()
        )

    @staticmethod
    def list_all():
        return BorrowRecord.query.order_by(BorrowRecord.borrow_id.desc()).all()

    @staticmethod
    def add(record: BorrowRecord):
        # no commit: the calling workflow owns the transaction
        db.session.add(record)
        db.session.flush()
        return record

    @staticmethod
    def outstanding_for_book(book_id: int):
        return BorrowRecord.query.filter(
            BorrowRecord.book_id == book_id,
            BorrowRecord.return_date.is_(None)
        ).all()

    @staticmethod
    def outstanding_book_ids():
        rows = (
            db.session.query(BorrowRecord.book_id)
            .filter(BorrowRecord.return_date.is_(None))
            .distinct()
            .all()
        )
        return {r.book_id for r in rows}

    @staticmethod
    def find_overdue(before: datetime):
        return BorrowRecord.query.filter(
            BorrowRecord.return_date.is_(None),
            BorrowRecord.due_date < before
        ).order_by(BorrowRecord.borrow_id).all()
