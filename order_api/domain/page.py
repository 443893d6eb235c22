"""
Page - windowed list result shared by every list endpoint
"""
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageParams(BaseModel):
    """Window requested by the client"""
    limit: int = Field(..., gt=0)
    offset: int = Field(0, ge=0)


class Page(BaseModel, Generic[T]):
    """
    A slice of results plus the offset of the next slice

    `next` is only set when more results exist after this window.
    """
    result: List[T] = Field(default_factory=list)
    next: Optional[int] = None

    @classmethod
    def from_window(cls, rows: List[T], params: PageParams) -> "Page[T]":
        """
        Build a page from a query that fetched limit + 1 rows

        The extra row only signals that another page exists; it is dropped.
        """
        if len(rows) > params.limit:
            return cls(result=rows[:params.limit], next=params.offset + params.limit)
        return cls(result=rows)

    def to_dict(self) -> dict:
        data = {'result': [item.to_dict() for item in self.result]}
        if self.next is not None:
            data['next'] = self.next
        return data
