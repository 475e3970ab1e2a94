from flask import current_app

from library_lending.errors import ConflictError, NotFoundError
from library_lending.repositories.fine_repo import FineRepo


class FineService:
    @staticmethod
    def list_fines(only_unpaid: bool = False):
        return FineRepo.list_all(only_unpaid=only_unpaid)

    @staticmethod
    def get_fine(borrow_id: int):
        fine = FineRepo.get(borrow_id)
        if not fine:
            raise NotFoundError(f"No fine for borrow {borrow_id}")
        return fine

    @staticmethod
    def pay_fine(borrow_id: int):
        fine = FineService.get_fine(borrow_id)
        if fine.is_paid:
            raise ConflictError(f"Fine for borrow {borrow_id} is already paid")

        fine.is_paid = True
        FineRepo.commit()
        current_app.logger.info(f"[fine] borrow={borrow_id} paid amount={fine.amount}")
        return fine
