# src/services/metadata_service.py
# Responsibility: Runs the extraction pipeline (Fetch -> Microdata scan -> Field selection).

from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel

from src.crawler.crawler import WebCrawler
from src.metadata.accessor import MetadataAccessor
from src.metadata.microdata import SchemaOrgParser
from src.metadata.models import Article, Image
from src.metadata.schema_org_accessor import SchemaOrgAccessor


class MetadataResult(BaseModel):
    source_url: str = ""
    title: str
    type: str
    url: str
    description: str
    publisher: str
    copyright: str
    author: str
    images: List[Image]
    article: Optional[Article] = None
    opt_out: bool = False


class MetadataService:
    """
    Turns HTML documents into MetadataResult objects using the schema.org accessor.
    """

    def __init__(self, crawler: Optional[WebCrawler] = None):
        self.crawler = crawler or WebCrawler()

    def extract(self, html_content: str, url: str = "") -> MetadataResult:
        parser = SchemaOrgParser.from_html(html_content, base_url=url)
        return self.collect(SchemaOrgAccessor(parser), source_url=url)

    def fetch_and_extract(self, url: str) -> Optional[MetadataResult]:
        html_content = self.crawler.fetch(url)
        if html_content is None:
            print(f"[Metadata] Nothing to extract for {url}")
            return None
        return self.extract(html_content, url=url)

    @staticmethod
    def collect(accessor: MetadataAccessor, source_url: str = "") -> MetadataResult:
        """Reads every field of an accessor into a single result."""
        return MetadataResult(
            source_url=source_url,
            title=accessor.title(),
            type=accessor.type(),
            url=accessor.url(),
            description=accessor.description(),
            publisher=accessor.publisher(),
            copyright=accessor.copyright(),
            author=accessor.author(),
            images=accessor.images(),
            article=accessor.article(),
            opt_out=accessor.opt_out(),
        )


@lru_cache()
def get_metadata_service() -> MetadataService:
    """Dependency injection provider for MetadataService."""
    return MetadataService()
