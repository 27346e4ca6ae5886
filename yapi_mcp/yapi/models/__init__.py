from .dto import (
    ApiInterface,
    ApiListItem,
    ApiMenu,
    Category,
    Envelope,
    ListResult,
    ProjectInfo,
    SearchResult,
)

__all__ = [
    "ApiInterface",
    "ApiListItem",
    "ApiMenu",
    "Category",
    "Envelope",
    "ListResult",
    "ProjectInfo",
    "SearchResult",
]
