import math
from dataclasses import dataclass

from django.conf import settings


@dataclass(frozen=True)
class Page:
    skip: int
    take: int


def paginate(page: int, page_size: int | None = None) -> Page:
    """
    1-indexed page -> offset/limit.
    page <= 0 is passed through as is (negative offset), callers validate it.
    """
    take = page_size or settings.PAGINATION_MAX
    return Page(skip=(page - 1) * take, take=take)


def total_pages(total_count: int, page_size: int | None = None) -> int:
    return math.ceil(total_count / (page_size or settings.PAGINATION_MAX))
