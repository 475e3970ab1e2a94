from library_lending.models.author import Author
from library_lending.extensions import db

class AuthorRepo:
    @staticmethod
    def list_all():
        return Author.query.order_by(Author.author_id).all()

    @staticmethod
    def get(author_id: int):
        return db.session.get(Author, author_id)

    @staticmethod
    def create(author: Author):
        db.session.add(author)
        db.session.commit()
        return author

    @staticmethod
    def delete(author: Author):
        db.session.delete(author)
        db.session.commit()
