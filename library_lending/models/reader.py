from datetime import date
from library_lending.extensions import db


class Reader(db.Model):
    __tablename__ = "readers"

    reader_id = db.Column(db.Integer, primary_key=True)
    reader_name = db.Column(db.String(50), nullable=False, index=True)
    register_date = db.Column(db.Date, nullable=False, default=date.today)

    borrow_records = db.relationship(
        "BorrowRecord",
        back_populates="reader",
        cascade="all, delete-orphan",
    )
