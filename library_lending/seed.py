from datetime import date, datetime

from flask import current_app

from library_lending.repositories.reader_repo import ReaderRepo
from library_lending.services.borrow_service import BorrowService
from library_lending.services.catalog_service import CatalogService
from library_lending.services.reader_service import ReaderService


def seed_demo_data() -> bool:
    """
    Loads the small demo data set (3 categories, 3 authors, 3 books,
    3 readers, one outstanding and one returned borrow).
    Returns False when the database already has readers.
    """
    if ReaderRepo.list_all():
        current_app.logger.info("[seed] readers already present, skipped.")
        return False

    # categories
    martial_arts = CatalogService.create_category("Martial Arts Fiction", category_id=1)
    literary = CatalogService.create_category("Literary Fiction", category_id=2)
    wellness = CatalogService.create_category("Wellness Fiction", category_id=3)

    # readers
    ming = ReaderService.register_reader("Wang Xiaoming", date(2023, 1, 10), reader_id=1)
    meili = ReaderService.register_reader("Lin Meili", date(2023, 3, 15), reader_id=2)
    ReaderService.register_reader("Wang Dajun", date(2023, 2, 10), reader_id=3)

    # authors
    jin_yong = CatalogService.create_author("Jin Yong", author_id=1)
    murakami = CatalogService.create_author("Haruki Murakami", author_id=2)
    meizi = CatalogService.create_author("Meizi", author_id=3)

    # books
    condor = CatalogService.create_book(
        "The Legend of the Condor Heroes", jin_yong.author_id, martial_arts.category_id, 1980, book_id=1
    )
    norwegian = CatalogService.create_book(
        "Norwegian Wood", murakami.author_id, literary.category_id, 1995, book_id=2
    )
    CatalogService.create_book("The Plum in the Golden Vase", meizi.author_id, wellness.category_id, 1985, book_id=3)

    # one outstanding borrow, one returned on time
    BorrowService.borrow_book(
        ming.reader_id, condor.book_id, datetime(2024, 5, 1, 10, 0), datetime(2024, 5, 15, 23, 59, 59)
    )
    returned = BorrowService.borrow_book(
        meili.reader_id, norwegian.book_id, datetime(2024, 5, 2, 10, 0), datetime(2024, 5, 16, 23, 59, 59)
    )
    BorrowService.return_book(returned, datetime(2024, 5, 10, 18, 0))

    current_app.logger.info("[seed] demo data loaded.")
    return True
