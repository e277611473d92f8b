from .search import SearchRequest, SearchResponse, SearchResultSchema
from .documents import CategoryCountSchema, FullDocumentResponse
from .faq import (
    FaqCreate,
    FaqMatchResponse,
    FaqResponse,
    FaqSearchRequest,
    FaqSearchResponse,
)
from .changelog import ChangelogResponse, SDKInfoSchema, SDKListResponse
from .indexing import IndexingStartedResponse

__all__ = [
    "SearchRequest",
    "SearchResponse",
    "SearchResultSchema",
    "CategoryCountSchema",
    "FullDocumentResponse",
    "FaqCreate",
    "FaqMatchResponse",
    "FaqResponse",
    "FaqSearchRequest",
    "FaqSearchResponse",
    "ChangelogResponse",
    "SDKInfoSchema",
    "SDKListResponse",
    "IndexingStartedResponse",
]
