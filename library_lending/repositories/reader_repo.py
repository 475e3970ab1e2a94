from library_lending.models.reader import Reader
from library_lending.extensions import db

class ReaderRepo:
    @staticmethod
    def list_all():
        return Reader.query.order_by(Reader.reader_id).all()

    @staticmethod
    def get(reader_id: int):
        return db.session.get(Reader, reader_id)

    @staticmethod
    def create(reader: Reader):
        db.session.add(reader)
        db.session.commit()
        return reader

    @staticmethod
    def delete(reader: Reader):
        db.session.delete(reader)
        db.session.commit()
