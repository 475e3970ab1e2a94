from library_lending.extensions import db


class Fine(db.Model):
    __tablename__ = "fines"

    borrow_id = db.Column(
        db.Integer,
        db.ForeignKey("borrow_records.borrow_id", ondelete="CASCADE"),
        primary_key=True,
    )

    amount = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    is_paid = db.Column(db.Boolean, nullable=False, default=False)

    borrow = db.relationship("BorrowRecord", back_populates="fine")

    __table_args__ = (
        db.CheckConstraint("amount >= 0", name="ck_fine_amount_non_negative"),
    )
