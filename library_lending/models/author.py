from library_lending.extensions import db


class Author(db.Model):
    __tablename__ = "authors"

    author_id = db.Column(db.Integer, primary_key=True)
    author_name = db.Column(db.String(50), nullable=False, index=True)

    # deleting an author keeps the books, their author_id becomes NULL
    books = db.relationship("Book", back_populates="author")
