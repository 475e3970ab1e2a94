"""
Keeps Book.is_available in step with the lending ledger.

Every ledger write calls exactly one of these hooks in the same session,
before the caller commits, so the flag and the outstanding borrow change
together or not at all. Nothing here commits.

Invariant: book.is_available is False iff the book has a BorrowRecord
whose return_date is NULL.
"""
from flask import current_app

from library_lending.models.book import Book
from library_lending.repositories.borrow_repo import BorrowRepo


class ConsistencyEngine:
    @staticmethod
    def on_borrow_created(record):
        book = record.book
        book.is_available = False
        current_app.logger.info(f"[consistency] book={book.book_id} -> unavailable (borrow={record.borrow_id})")

    @staticmethod
    def on_borrow_returned(record, previous_return_date):
        # only the NULL -> NOT NULL transition frees the book
        if previous_return_date is not None or record.return_date is None:
            return
        book = record.book
        book.is_available = True
        current_app.logger.info(f"[consistency] book={book.book_id} -> available (borrow={record.borrow_id})")

    @staticmethod
    def on_borrow_removed(record):
        """Outstanding record deleted by a cascade (reader removed)."""
        if not record.is_outstanding:
            return
        book = record.book
        if book is None:
            return
        others = [r for r in BorrowRepo.outstanding_for_book(book.book_id) if r.borrow_id != record.borrow_id]
        if not others:
            book.is_available = True
            current_app.logger.info(f"[consistency] book={book.book_id} -> available (borrow={record.borrow_id} removed)")

    @staticmethod
    def audit():
        """Books whose flag disagrees with the ledger. Empty list means consistent."""
        outstanding = BorrowRepo.outstanding_book_ids()
        mismatches = []
        for book in Book.query.order_by(Book.book_id).all():
            expected = book.book_id not in outstanding
            if bool(book.is_available) != expected:
                mismatches.append({
                    "book_id": book.book_id,
                    "is_available": bool(book.is_available),
                    "expected": expected,
                })
        return mismatches
