from library_lending.extensions import db


class BorrowRecord(db.Model):
    __tablename__ = "borrow_records"

    borrow_id = db.Column(db.Integer, primary_key=True)

    reader_id = db.Column(
        db.Integer, db.ForeignKey("readers.reader_id", ondelete="CASCADE"), nullable=False, index=True
    )
    book_id = db.Column(
        db.Integer, db.ForeignKey("books.book_id", ondelete="CASCADE"), nullable=False, index=True
    )

    borrow_date = db.Column(db.DateTime, nullable=False)
    due_date = db.Column(db.DateTime, nullable=False)
    return_date = db.Column(db.DateTime, nullable=True)

    reader = db.relationship("Reader", back_populates="borrow_records")
    book = db.relationship("Book", back_populates="borrow_records")
    fine = db.relationship(
        "Fine",
        back_populates="borrow",
        uselist=False,
        cascade="all, delete-orphan",
    )

    @property
    def is_outstanding(self) -> bool:
        return self.return_date is None

    __table_args__ = (
        db.CheckConstraint("due_date > borrow_date", name="ck_borrow_due_after_borrow"),
    )
