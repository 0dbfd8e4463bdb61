# lending/sa/repositories/copy.py
from typing import List
from lending.errors import NotFound
from lending.sa.models import Copy, CopyStatus
from .base import BaseRepository

class CopyRepository(BaseRepository[Copy]):
    model = Copy

    def get_by_status(self, status: CopyStatus) -> List[Copy]:
        return (
            self.session.query(Copy)
            .filter(Copy.status == status)
            .order_by(Copy.id)
            .all()
        )

    def set_status(self, copy_id: int, status: CopyStatus) -> Copy:
        """Move a copy to another status and persist it.

        Raises:
            NotFound: If the copy does not exist
        """
        copy = self.find_by_id(copy_id)
        if copy is None:
            raise NotFound(self.kind, copy_id)
        copy.status = CopyStatus(status)
        return self.update(copy)
