from library_lending.extensions import db


class Book(db.Model):
    __tablename__ = "books"

    book_id = db.Column(db.Integer, primary_key=True)
    book_title = db.Column(db.String(100), nullable=False, index=True)

    author_id = db.Column(
        db.Integer, db.ForeignKey("authors.author_id", ondelete="SET NULL"), nullable=True, index=True
    )
    category_id = db.Column(
        db.Integer, db.ForeignKey("categories.category_id", ondelete="SET NULL"), nullable=True, index=True
    )

    publish_year = db.Column(db.Integer, nullable=True)

    # only ConsistencyEngine writes this column
    is_available = db.Column(db.Boolean, nullable=False, default=True)

    author = db.relationship("Author", back_populates="books")
    category = db.relationship("Category", back_populates="books")
    borrow_records = db.relationship(
        "BorrowRecord",
        back_populates="book",
        cascade="all, delete-orphan",
    )
