# src/metadata/schema_org_accessor.py
# Responsibility: Pick canonical article metadata out of the schema.org items of a page.

from typing import List, Optional

from src.metadata.accessor import ARTICLE_TYPE, MetadataAccessor
from src.metadata.microdata import (
    AUTHOR_PROP,
    COPYRIGHT_HOLDER_PROP,
    CREATOR_PROP,
    DESCRIPTION_PROP,
    HEADLINE_PROP,
    NAME_PROP,
    PUBLISHER_PROP,
    URL_PROP,
    SchemaOrgParser,
)
from src.metadata.models import Article, Image


class SchemaOrgAccessor(MetadataAccessor):
    """
    MetadataAccessor backed by schema.org microdata.

    Every field is computed independently from the parser's article and image
    candidates. Nothing is cached or mutated, so calls can be repeated freely.
    """

    def __init__(self, parser: SchemaOrgParser):
        self.parser = parser

    def title(self) -> str:
        articles = self.parser.get_article_items()

        # "headline" of the first article that has one
        for article in articles:
            title = article.get_string_property(HEADLINE_PROP)
            if title:
                return title

        # Otherwise "name"
        for article in articles:
            title = article.get_string_property(NAME_PROP)
            if title:
                return title

        return ""

    def type(self) -> str:
        return ARTICLE_TYPE if self.parser.get_article_items() else ""

    def url(self) -> str:
        articles = self.parser.get_article_items()
        return articles[0].get_string_property(URL_PROP) if articles else ""

    def images(self) -> List[Image]:
        """
        Images are ordered as follows:
        1) the associatedMedia / encoding image of the first article declaring one,
           or else the first ImageObject that is representativeOfPage,
        2) the "image" property of the remaining articles,
        3) the remaining ImageObjects.
        """
        images: List[Image] = []

        associated_image = None
        for article in self.parser.get_article_items():
            # The first associated image is placed once the ImageObjects are walked.
            if associated_image is None:
                associated_image = article.get_representative_image_item()
                if associated_image is not None:
                    continue
            image = article.get_image()
            if image is not None:
                images.append(image)

        inserted_representative = False
        for image_item in self.parser.get_image_items():
            image = image_item.get_image()
            if image_item is associated_image or (
                not inserted_representative and image_item.is_representative_of_page()
            ):
                inserted_representative = True
                images.insert(0, image)
            else:
                images.append(image)

        return images

    def description(self) -> str:
        articles = self.parser.get_article_items()
        return articles[0].get_string_property(DESCRIPTION_PROP) if articles else ""

    def publisher(self) -> str:
        articles = self.parser.get_article_items()
        if not articles:
            return ""
        article = articles[0]
        return (
            article.get_person_or_organization_name(PUBLISHER_PROP)
            or article.get_person_or_organization_name(COPYRIGHT_HOLDER_PROP)
        )

    def copyright(self) -> str:
        articles = self.parser.get_article_items()
        return articles[0].get_copyright() if articles else ""

    def author(self) -> str:
        author = ""
        articles = self.parser.get_article_items()
        if articles:
            article = articles[0]
            author = (
                article.get_person_or_organization_name(AUTHOR_PROP)
                or article.get_person_or_organization_name(CREATOR_PROP)
            )
        # Fall back to the document's rel="author" link
        return author or self.parser.get_author_from_rel()

    def article(self) -> Optional[Article]:
        articles = self.parser.get_article_items()
        return articles[0].get_article() if articles else None

    def opt_out(self) -> bool:
        return False
