from library_lending.models.category import Category
from library_lending.extensions import db

class CategoryRepo:
    @staticmethod
    def list_all():
        return Category.query.order_by(Category.category_id).all()

    @staticmethod
    def get(category_id: int):
        return db.session.get(Category, category_id)

    @staticmethod
    def get_by_name(name: str):
        return Category.query.filter_by(category_name=name).first()

    @staticmethod
    def create(category: Category):
        db.session.add(category)
        db.session.commit()
        return category

    @staticmethod
    def delete(category: Category):
        db.session.delete(category)
        db.session.commit()
