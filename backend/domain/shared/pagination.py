"""Page-based pagination."""

from dataclasses import dataclass

from domain.shared.errors import InvalidInputError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class Pagination:
    """1-based page number and page size.

    Examples:
        >>> Pagination(page=2, limit=10).skip
        10
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 1:
            raise InvalidInputError("page", "must be >= 1")
        if self.limit < 1:
            raise InvalidInputError("limit", "must be >= 1")

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit
