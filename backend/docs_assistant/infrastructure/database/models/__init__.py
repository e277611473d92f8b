from .resource_models import ResourceModel
from .resource_chunk_models import ResourceChunkModel
from .faq_models import FaqModel

__all__ = [
    "ResourceModel",
    "ResourceChunkModel",
    "FaqModel",
]
