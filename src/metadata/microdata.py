# src/metadata/microdata.py
# Responsibility: Scan schema.org microdata items out of an HTML tree (article / image candidates).

import re
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from src.config.settings import settings
from src.metadata.models import Article, Image


# -------------------------------
# Constants
# -------------------------------
SCHEMA_ORG_PREFIXES = (
    "http://schema.org/", "https://schema.org/", "http://www.schema.org/", "https://www.schema.org/"
)

ARTICLE_TYPES = {
    "Article", "BlogPosting", "NewsArticle", "ScholarlyArticle", "TechArticle",
    "Report", "SocialMediaPosting", "Reportage",
}
IMAGE_TYPES = {"ImageObject"}
PERSON_TYPES = {"Person"}
ORGANIZATION_TYPES = {
    "Organization", "Corporation", "EducationalOrganization", "GovernmentOrganization",
    "NGO", "NewsMediaOrganization", "SportsOrganization", "PerformingGroup",
}

# Property names
HEADLINE_PROP = "headline"
NAME_PROP = "name"
URL_PROP = "url"
DESCRIPTION_PROP = "description"
IMAGE_PROP = "image"
AUTHOR_PROP = "author"
CREATOR_PROP = "creator"
PUBLISHER_PROP = "publisher"
COPYRIGHT_HOLDER_PROP = "copyrightHolder"
COPYRIGHT_YEAR_PROP = "copyrightYear"
DATE_PUBLISHED_PROP = "datePublished"
DATE_MODIFIED_PROP = "dateModified"
EXPIRES_PROP = "expires"
SECTION_PROP = "articleSection"
ASSOCIATED_MEDIA_PROP = "associatedMedia"
ENCODING_PROP = "encoding"
CONTENT_URL_PROP = "contentUrl"
ENCODING_FORMAT_PROP = "encodingFormat"
CAPTION_PROP = "caption"
WIDTH_PROP = "width"
HEIGHT_PROP = "height"
REPRESENTATIVE_PROP = "representativeOfPage"
GIVEN_NAME_PROP = "givenName"
FAMILY_NAME_PROP = "familyName"

# Element name -> attribute carrying the property value
VALUE_ATTRIBUTES = {
    "meta": "content",
    "audio": "src", "embed": "src", "iframe": "src", "img": "src",
    "source": "src", "track": "src", "video": "src",
    "a": "href", "area": "href", "link": "href",
    "object": "data",
    "data": "value", "meter": "value",
}
URL_ATTRIBUTES = {"src", "href", "data"}

REL_AUTHOR_SELECTOR = 'a[rel~="author"], link[rel~="author"]'


# -------------------------------
# Items
# -------------------------------
class SchemaItem:
    """
    One itemscope of the document and the properties declared inside it.
    Values are either strings or nested SchemaItem instances.
    Items compare by identity only.
    """

    def __init__(self, type_name: str):
        self.type_name = type_name
        self._properties: Dict[str, List[Union[str, "SchemaItem"]]] = {}

    def add_property(self, name: str, value: Union[str, "SchemaItem"]) -> None:
        self._properties.setdefault(name, []).append(value)

    def get_string_properties(self, name: str) -> List[str]:
        return [v for v in self._properties.get(name, []) if isinstance(v, str)]

    def get_item_properties(self, name: str) -> List["SchemaItem"]:
        return [v for v in self._properties.get(name, []) if isinstance(v, SchemaItem)]

    def get_string_property(self, name: str) -> str:
        """First string value of the property, or "" if there is none."""
        values = self.get_string_properties(name)
        return values[0] if values else ""

    def get_item_property(self, name: str) -> Optional["SchemaItem"]:
        values = self.get_item_properties(name)
        return values[0] if values else None

    def get_person_or_organization_name(self, name: str) -> str:
        """
        Returns the plain string value of the property, or the name of the
        Person / Organization item it points to, or "".
        """
        value = self.get_string_property(name)
        if value:
            return value
        return _name_of(self.get_item_property(name))


class PersonItem(SchemaItem):
    def get_name(self) -> str:
        name = self.get_string_property(NAME_PROP)
        if name:
            return name
        parts = [self.get_string_property(GIVEN_NAME_PROP), self.get_string_property(FAMILY_NAME_PROP)]
        return " ".join(p for p in parts if p)


class OrganizationItem(SchemaItem):
    def get_name(self) -> str:
        return self.get_string_property(NAME_PROP)


class ImageItem(SchemaItem):
    """ImageObject item."""

    def is_representative_of_page(self) -> bool:
        return self.get_string_property(REPRESENTATIVE_PROP).lower() == "true"

    def get_image(self) -> Image:
        url = self.get_string_property(CONTENT_URL_PROP) or self.get_string_property(URL_PROP)
        return Image(
            url=url,
            secure_url=url if url.lower().startswith("https:") else "",
            type=self.get_string_property(ENCODING_FORMAT_PROP),
            caption=self.get_string_property(CAPTION_PROP),
            width=_parse_dimension(self.get_string_property(WIDTH_PROP)),
            height=_parse_dimension(self.get_string_property(HEIGHT_PROP)),
        )


class ArticleItem(SchemaItem):
    """Article-like item (Article, NewsArticle, BlogPosting, ...)."""

    def get_copyright(self) -> str:
        # "Copyright <year> <holder>", skipping whichever part is missing
        parts = [
            self.get_string_property(COPYRIGHT_YEAR_PROP),
            self.get_person_or_organization_name(COPYRIGHT_HOLDER_PROP),
        ]
        text = " ".join(p for p in parts if p)
        return f"Copyright {text}" if text else ""

    def get_representative_image_item(self) -> Optional[ImageItem]:
        # First "associatedMedia" item, else first "encoding" item; only kept if it is an ImageObject
        item = self.get_item_property(ASSOCIATED_MEDIA_PROP) or self.get_item_property(ENCODING_PROP)
        return item if isinstance(item, ImageItem) else None

    def get_image(self) -> Optional[Image]:
        url = self.get_string_property(IMAGE_PROP)
        if not url:
            return None
        return Image(url=url)

    def get_article(self) -> Article:
        authors = self._names(AUTHOR_PROP) or self._names(CREATOR_PROP)
        return Article(
            published_time=self.get_string_property(DATE_PUBLISHED_PROP),
            modified_time=self.get_string_property(DATE_MODIFIED_PROP),
            expiration_time=self.get_string_property(EXPIRES_PROP),
            section=self.get_string_property(SECTION_PROP),
            authors=authors,
        )

    def _names(self, name: str) -> List[str]:
        names = []
        for value in self._properties.get(name, []):
            text = value if isinstance(value, str) else _name_of(value)
            if text:
                names.append(text)
        return names


def _name_of(item: Optional[SchemaItem]) -> str:
    if isinstance(item, (PersonItem, OrganizationItem)):
        return item.get_name()
    return ""


def _parse_dimension(val: Any) -> Optional[int]:
    if not val:
        return None
    try:
        return int(str(val).strip().lower().replace("px", ""))
    except ValueError:
        return None


# -------------------------------
# Parser (Item Store)
# -------------------------------
class SchemaOrgParser:
    """
    Walks a parsed document once and materializes its schema.org items.
    - Article candidates and ImageObject candidates, in document order
    - Nested Person / Organization items resolved as property values
    - Document-level rel="author" fallback
    """

    def __init__(self, root: Tag, base_url: str = ""):
        self.base_url = base_url
        self._article_items: List[ArticleItem] = []
        self._image_items: List[ImageItem] = []
        self._scan(root)
        self._author_from_rel = self._extract_author_from_rel(root)

    @classmethod
    def from_html(cls, html_content: str, base_url: str = "") -> "SchemaOrgParser":
        soup = BeautifulSoup(html_content, settings.EXTRACTOR.HTML_PARSER)
        return cls(soup, base_url=base_url)

    def get_article_items(self) -> Tuple[ArticleItem, ...]:
        return tuple(self._article_items)

    def get_image_items(self) -> Tuple[ImageItem, ...]:
        return tuple(self._image_items)

    def get_author_from_rel(self) -> str:
        return self._author_from_rel

    # ---------------------------
    # Scanning
    # ---------------------------
    def _scan(self, root: Tag) -> None:
        # Iterative pre-order walk; each entry carries the enclosing itemscope.
        stack: List[Tuple[Tag, Optional[SchemaItem]]] = [(root, None)]
        while stack:
            element, scope = stack.pop()

            item = None
            if element.has_attr("itemscope"):
                item = self._create_item(element)

            if scope is not None and element.has_attr("itemprop"):
                value = item if item is not None else self._property_value(element)
                for name in self._itemprop_names(element):
                    scope.add_property(name, value)

            child_scope = item if item is not None else scope
            children = [c for c in element.children if isinstance(c, Tag)]
            for child in reversed(children):
                stack.append((child, child_scope))

    def _create_item(self, element: Tag) -> SchemaItem:
        type_name = self._schema_type(element)
        if type_name in ARTICLE_TYPES:
            item: SchemaItem = ArticleItem(type_name)
            self._article_items.append(item)
        elif type_name in IMAGE_TYPES:
            item = ImageItem(type_name)
            self._image_items.append(item)
        elif type_name in PERSON_TYPES:
            item = PersonItem(type_name)
        elif type_name in ORGANIZATION_TYPES:
            item = OrganizationItem(type_name)
        else:
            # Unsupported scopes still own the properties declared inside them
            item = SchemaItem(type_name)
        return item

    def _schema_type(self, element: Tag) -> str:
        itemtype = self._attr_text(element, "itemtype")
        if not itemtype:
            return ""
        first = itemtype.split()[0]
        for prefix in SCHEMA_ORG_PREFIXES:
            if first.startswith(prefix):
                return first[len(prefix):].strip("/")
        return ""

    def _itemprop_names(self, element: Tag) -> List[str]:
        return self._attr_text(element, "itemprop").split()

    def _property_value(self, element: Tag) -> str:
        tag_name = element.name.lower()
        if tag_name == "time" and element.has_attr("datetime"):
            return self._attr_text(element, "datetime").strip()

        attr = VALUE_ATTRIBUTES.get(tag_name)
        if attr:
            value = self._attr_text(element, attr).strip()
            if value and attr in URL_ATTRIBUTES and self.base_url:
                value = urljoin(self.base_url, value)
            return value

        return re.sub(r"\s+", " ", element.get_text()).strip()

    def _attr_text(self, element: Tag, attr: str) -> str:
        value = element.get(attr)
        if isinstance(value, list):
            return " ".join(value)
        return value or ""

    # ---------------------------
    # rel="author"
    # ---------------------------
    def _extract_author_from_rel(self, root: Tag) -> str:
        for tag in root.select(REL_AUTHOR_SELECTOR):
            text = re.sub(r"\s+", " ", tag.get_text()).strip()
            if text:
                return text
        return ""
