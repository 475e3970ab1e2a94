from datetime import timedelta
from decimal import Decimal

from flask import current_app
from sqlalchemy.exc import IntegrityError

from library_lending.extensions import db
from library_lending.errors import ConflictError, NotFoundError, ValidationError
from library_lending.models.borrow import BorrowRecord
from library_lending.models.fine import Fine
from library_lending.repositories.book_repo import BookRepo
from library_lending.repositories.borrow_repo import BorrowRepo
from library_lending.repositories.fine_repo import FineRepo
from library_lending.repositories.reader_repo import ReaderRepo
from library_lending.services.consistency_engine import ConsistencyEngine
from library_lending.services.fine_calculator import calculate_fine
from library_lending.utils.dates import as_datetime, utc_now

# fines primary key as named in sqlite / postgres / mysql / mssql errors
DUPLICATE_FINE_MARKERS = ("fines.borrow_id", "fines_pkey", "fines.primary", "pk__fines")


def _is_duplicate_fine(error: IntegrityError) -> bool:
    message = str(error.orig).lower()
    return any(marker in message for marker in DUPLICATE_FINE_MARKERS)


class BorrowService:
    @staticmethod
    def borrow_book(reader_id: int, book_id: int, borrow_date=None, due_date=None) -> int:
        """
        Inserts a BorrowRecord and marks the book unavailable in one commit.
        borrow_date defaults to now, due_date to borrow_date + LOAN_DAYS.
        Returns the new borrow_id.
        """
        borrow_date = as_datetime(borrow_date) if borrow_date is not None else utc_now()
        if due_date is None:
            due_date = borrow_date + timedelta(days=current_app.config.get("LOAN_DAYS", 14))
        due_date = as_datetime(due_date)

        if due_date <= borrow_date:
            raise ValidationError("due_date must be after borrow_date")

        reader = ReaderRepo.get(reader_id)
        if not reader:
            raise NotFoundError(f"Reader {reader_id} not found")

        book = BookRepo.get(book_id)
        if not book:
            raise NotFoundError(f"Book {book_id} not found")

        if not book.is_available:
            current_app.logger.warning(f"[borrow] rejected: book={book_id} is already on loan")
            raise ConflictError(f"Book {book_id} is not available")

        try:
            record = BorrowRecord(
                reader=reader,
                book=book,
                borrow_date=borrow_date,
                due_date=due_date,
            )
            BorrowRepo.add(record)
            ConsistencyEngine.on_borrow_created(record)

            # single commit point
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        current_app.logger.info(
            f"[borrow] borrow={record.borrow_id} reader={reader_id} book={book_id} due={due_date.isoformat()}"
        )
        return record.borrow_id

    @staticmethod
    def return_book(borrow_id: int, return_date=None) -> dict:
        """
        Return workflow, all-or-nothing:
        - record must exist and still be outstanding
        - return_date is stored, fine computed from due_date
        - a Fine row is created only when the fine is positive
        - the book becomes available again
        """
        return_date = as_datetime(return_date) if return_date is not None else utc_now()

        try:
            record = BorrowRepo.get(borrow_id)
            if not record:
                raise NotFoundError(f"Borrow record {borrow_id} not found")

            if record.return_date is not None:
                raise ConflictError(f"Borrow record {borrow_id} was already returned")

            if return_date < record.borrow_date:
                raise ValidationError("return_date must not be before borrow_date")

            previous = record.return_date
            record.return_date = return_date

            fine_amount = calculate_fine(
                record.due_date,
                return_date,
                current_app.config.get("FINE_PER_DAY", 10),
            )

            if fine_amount > 0:
                if FineRepo.get(record.borrow_id) is not None:
                    raise ConflictError(f"A fine already exists for borrow {borrow_id}")
                FineRepo.add(Fine(borrow_id=record.borrow_id, amount=Decimal(fine_amount), is_paid=False))

            ConsistencyEngine.on_borrow_returned(record, previous)

            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            current_app.logger.warning(f"[return] borrow={borrow_id} integrity error: {e.orig}")
            if _is_duplicate_fine(e):
                raise ConflictError(f"A fine already exists for borrow {borrow_id}")
            raise ConflictError(f"Return of borrow {borrow_id} violates a constraint: {e.orig}")
        except Exception:
            db.session.rollback()
            raise

        current_app.logger.info(
            f"[return] borrow={borrow_id} book={record.book_id} fine={fine_amount}"
        )
        return {
            "borrow_id": record.borrow_id,
            "book_id": record.book_id,
            "return_date": record.return_date,
            "fine_amount": fine_amount,
        }

    @staticmethod
    def get_borrow(borrow_id: int):
        record = BorrowRepo.get(borrow_id)
        if not record:
            raise NotFoundError(f"Borrow record {borrow_id} not found")
        return record

    @staticmethod
    def list_borrows(reader_id=None):
        if reader_id is not None:
            return BorrowRepo.list_by_reader(reader_id)
        return BorrowRepo.list_all()
