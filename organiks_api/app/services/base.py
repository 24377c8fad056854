"""
Helpers shared by the record services.
"""

from typing import List, Optional, TypeVar

from organiks_api.app.core.exceptions import NotFoundError
from organiks_api.app.store.repository import Repository

T = TypeVar("T")


class BaseRecordService:
    """Holds the repository and the not-found conventions.

    Missing records, empty listings and empty search results are all
    reported with ``NotFoundError`` rather than ``None`` or ``[]``.
    """

    def __init__(self, repository: Repository):
        self.repository = repository

    @staticmethod
    def _found(record: Optional[T], message: str) -> T:
        if record is None:
            raise NotFoundError(message)
        return record

    @staticmethod
    def _non_empty(records: List[T], message: str) -> List[T]:
        if not records:
            raise NotFoundError(message)
        return records
