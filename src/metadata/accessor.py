# src/metadata/accessor.py
# Responsibility: Shared contract for per-vocabulary metadata accessors.

from abc import ABC, abstractmethod
from typing import List, Optional

from src.metadata.models import Article, Image

# Marker returned by type() when the page declares an article
ARTICLE_TYPE = "Article"


class MetadataAccessor(ABC):
    """
    Read-only view over the metadata one markup vocabulary declares for a page.
    Missing values are reported as "", [] or None, never as errors.
    """

    @abstractmethod
    def title(self) -> str:
        pass

    @abstractmethod
    def type(self) -> str:
        pass

    @abstractmethod
    def url(self) -> str:
        pass

    @abstractmethod
    def images(self) -> List[Image]:
        pass

    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def publisher(self) -> str:
        pass

    @abstractmethod
    def copyright(self) -> str:
        pass

    @abstractmethod
    def author(self) -> str:
        pass

    @abstractmethod
    def article(self) -> Optional[Article]:
        pass

    @abstractmethod
    def opt_out(self) -> bool:
        pass
