"""Common schemas used across multiple modules"""
from pydantic import BaseModel


class PaginationMeta(BaseModel):
    """Pagination metadata"""
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @classmethod
    def from_counts(cls, page: int, page_size: int, total_items: int) -> "PaginationMeta":
        """Build pagination metadata from a page request and the item count"""
        total_pages = (total_items + page_size - 1) // page_size if total_items > 0 else 0
        return cls(
            page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
        )
