"""Read-only aggregates over the ledger. Nothing here writes."""
from datetime import date, datetime, time

from flask import current_app
from sqlalchemy import func, select, text

from library_lending.extensions import db
from library_lending.errors import NotFoundError, ValidationError
from library_lending.models.book import Book
from library_lending.models.borrow import BorrowRecord
from library_lending.models.reader import Reader
from library_lending.repositories.borrow_repo import BorrowRepo
from library_lending.repositories.reader_repo import ReaderRepo
from library_lending.utils.dates import utc_today


class ReportService:
    @staticmethod
    def list_overdue(today: date = None):
        """Outstanding records whose due date is before the start of today."""
        today = today or utc_today()
        return BorrowRepo.find_overdue(datetime.combine(today, time.min))

    @staticmethod
    def top_borrowed_books(n: int = None):
        n = n if n is not None else current_app.config.get("TOP_BOOKS_LIMIT", 5)
        if n < 1:
            raise ValidationError("n must be at least 1")

        borrow_count = func.count(BorrowRecord.borrow_id).label("borrow_count")
        rows = (
            db.session.query(BorrowRecord.book_id, borrow_count)
            .group_by(BorrowRecord.book_id)
            .order_by(borrow_count.desc())
            .limit(n)
            .all()
        )
        return [(r.book_id, int(r.borrow_count)) for r in rows]

    @staticmethod
    def hot_books():
        """Rows of the hot_books view: books borrowed more than once."""
        rows = db.session.execute(
            text("SELECT book_id, book_title, borrow_count FROM hot_books ORDER BY book_id")
        ).all()
        return [(r.book_id, r.book_title, int(r.borrow_count)) for r in rows]

    @staticmethod
    def reader_history(reader_id: int):
        if not ReaderRepo.get(reader_id):
            raise NotFoundError(f"Reader {reader_id} not found")

        rows = (
            db.session.query(Book.book_title, BorrowRecord.borrow_date, BorrowRecord.return_date)
            .join(Book, BorrowRecord.book_id == Book.book_id)
            .filter(BorrowRecord.reader_id == reader_id)
            .order_by(BorrowRecord.borrow_date, BorrowRecord.borrow_id)
            .all()
        )
        return [(r.book_title, r.borrow_date, r.return_date) for r in rows]

    @staticmethod
    def reader_borrow_counts():
        # correlated subquery so readers without borrows report 0
        total_borrowed = (
            select(func.count(BorrowRecord.borrow_id))
            .where(BorrowRecord.reader_id == Reader.reader_id)
            .correlate(Reader)
            .scalar_subquery()
            .label("total_borrowed")
        )
        rows = (
            db.session.query(Reader.reader_name, total_borrowed)
            .order_by(Reader.reader_id)
            .all()
        )
        return [(r.reader_name, int(r.total_borrowed)) for r in rows]
