from datetime import date

from flask import current_app

from library_lending.extensions import db
from library_lending.errors import NotFoundError
from library_lending.models.reader import Reader
from library_lending.repositories.reader_repo import ReaderRepo
from library_lending.services.consistency_engine import ConsistencyEngine
from library_lending.utils.dates import utc_today
from library_lending.utils.validators import required_text


class ReaderService:
    @staticmethod
    def list_readers():
        return ReaderRepo.list_all()

    @staticmethod
    def get_reader(reader_id: int):
        reader = ReaderRepo.get(reader_id)
        if not reader:
            raise NotFoundError(f"Reader {reader_id} not found")
        return reader

    @staticmethod
    def register_reader(name: str, register_date: date = None, reader_id: int = None):
        name = required_text(name, "reader_name")

        reader = Reader(
            reader_id=reader_id,
            reader_name=name,
            register_date=register_date or utc_today(),
        )
        return ReaderRepo.create(reader)

    @staticmethod
    def delete_reader(reader_id: int):
        """
        Removes the reader together with their borrow history and fines.
        Books still on loan to the reader become available again.
        """
        reader = ReaderService.get_reader(reader_id)
        try:
            for record in list(reader.borrow_records):
                ConsistencyEngine.on_borrow_removed(record)
            ReaderRepo.delete(reader)
        except Exception:
            db.session.rollback()
            raise
        current_app.logger.info(f"[reader] reader={reader_id} deleted")
