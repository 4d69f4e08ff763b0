from src.metadata.microdata import ArticleItem, ImageItem, SchemaOrgParser
from src.metadata.schema_org_accessor import SchemaOrgAccessor

BASE_URL = "https://example.com/news/page"

# News article with nested author / publisher / associated image
SAMPLE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Rivers</title>
    <link rel="author" href="/about/jane">
</head>
<body>
    <article itemscope itemtype="http://schema.org/NewsArticle">
        <h1 itemprop="headline">Rivers Rise Again</h1>
        <meta itemprop="description" content="Flood watch extended.">
        <link itemprop="url" href="/news/rivers">
        <span itemprop="author" itemscope itemtype="https://schema.org/Person">
            <span itemprop="givenName">Ada</span> <span itemprop="familyName">Lovelace</span>
        </span>
        <div itemprop="publisher" itemscope itemtype="http://schema.org/Organization">
            <span itemprop="name">Daily Planet</span>
        </div>
        <meta itemprop="copyrightYear" content="2024">
        <time itemprop="datePublished" datetime="2024-03-01T08:00:00Z">March 1</time>
        <meta itemprop="articleSection" content="Weather">
        <div itemprop="associatedMedia" itemscope itemtype="http://schema.org/ImageObject">
            <img itemprop="contentUrl" src="/img/river.jpg">
            <meta itemprop="width" content="800">
            <meta itemprop="height" content="600px">
            <span itemprop="caption">The river   at dawn</span>
            <meta itemprop="encodingFormat" content="image/jpeg">
        </div>
    </article>
    <div itemscope itemtype="http://schema.org/ImageObject">
        <meta itemprop="representativeOfPage" content="True">
        <link itemprop="url" href="http://cdn.example.com/banner.png">
    </div>
    <p>By <a rel="author" href="/about/jane">Jane Roe</a></p>
</body>
</html>
"""


def test_sample_document_items():
    parser = SchemaOrgParser.from_html(SAMPLE_HTML, base_url=BASE_URL)

    articles = parser.get_article_items()
    images = parser.get_image_items()

    # 1. Candidates in document order
    assert len(articles) == 1
    assert isinstance(articles[0], ArticleItem)
    assert len(images) == 2
    assert all(isinstance(i, ImageItem) for i in images)

    # 2. Association refers to the very same candidate
    assert articles[0].get_representative_image_item() is images[0]
    assert images[1].is_representative_of_page() is True
    assert images[0].is_representative_of_page() is False

    # 3. rel=author skips elements without text
    assert parser.get_author_from_rel() == "Jane Roe"


def test_sample_document_metadata():
    parser = SchemaOrgParser.from_html(SAMPLE_HTML, base_url=BASE_URL)
    accessor = SchemaOrgAccessor(parser)

    assert accessor.title() == "Rivers Rise Again"
    assert accessor.type() == "Article"
    assert accessor.url() == "https://example.com/news/rivers"
    assert accessor.description() == "Flood watch extended."
    assert accessor.author() == "Ada Lovelace"
    assert accessor.publisher() == "Daily Planet"
    assert accessor.copyright() == "Copyright 2024"
    assert accessor.opt_out() is False

    article = accessor.article()
    assert article.published_time == "2024-03-01T08:00:00Z"
    assert article.section == "Weather"
    assert article.authors == ["Ada Lovelace"]

    images = accessor.images()
    assert [img.url for img in images] == [
        "https://example.com/img/river.jpg",
        "http://cdn.example.com/banner.png",
    ]
    river = images[0]
    assert river.secure_url == "https://example.com/img/river.jpg"
    assert river.width == 800
    assert river.height == 600
    assert river.caption == "The river at dawn"
    assert river.type == "image/jpeg"
    assert images[1].secure_url == ""


def test_document_without_microdata():
    parser = SchemaOrgParser.from_html("<html><body><p>Hello</p></body></html>")
    accessor = SchemaOrgAccessor(parser)

    assert parser.get_article_items() == ()
    assert parser.get_image_items() == ()
    assert accessor.title() == ""
    assert accessor.images() == []
    assert accessor.article() is None
    assert accessor.author() == ""


def test_rel_author_used_without_articles():
    html = '<html><body><a rel="author nofollow" href="/u/sam">  Sam   Smith </a></body></html>'
    accessor = SchemaOrgAccessor(SchemaOrgParser.from_html(html))
    assert accessor.author() == "Sam Smith"


def test_nested_unsupported_scope_keeps_its_properties():
    html = """
    <div itemscope itemtype="http://schema.org/BlogPosting">
        <span itemprop="name">Outer name</span>
        <div itemprop="review" itemscope itemtype="http://schema.org/Review">
            <span itemprop="headline">Inner headline</span>
        </div>
    </div>
    """
    parser = SchemaOrgParser.from_html(html)
    article = parser.get_article_items()[0]

    assert article.get_string_property("headline") == ""
    assert article.get_string_property("review") == ""
    assert SchemaOrgAccessor(parser).title() == "Outer name"


def test_non_schema_org_types_are_ignored():
    html = """
    <div itemscope itemtype="http://example.org/Article">
        <span itemprop="headline">Not schema.org</span>
    </div>
    """
    parser = SchemaOrgParser.from_html(html)
    assert parser.get_article_items() == ()


def test_multiple_property_names_and_values():
    html = """
    <div itemscope itemtype="https://www.schema.org/Article">
        <span itemprop="headline name">Shared title</span>
        <meta itemprop="image" content="https://example.com/first.jpg">
        <meta itemprop="image" content="https://example.com/second.jpg">
        <span itemprop="author">Alice</span>
        <span itemprop="author" itemscope itemtype="http://schema.org/Person">
            <span itemprop="name">Bob</span>
        </span>
    </div>
    """
    article = SchemaOrgParser.from_html(html).get_article_items()[0]

    assert article.get_string_property("headline") == "Shared title"
    assert article.get_string_property("name") == "Shared title"
    assert article.get_image().url == "https://example.com/first.jpg"
    assert article.get_article().authors == ["Alice", "Bob"]


def test_copyright_holder_and_creator_fallbacks():
    html = """
    <div itemscope itemtype="http://schema.org/Article">
        <meta itemprop="copyrightYear" content="2020">
        <div itemprop="copyrightHolder" itemscope itemtype="http://schema.org/Corporation">
            <span itemprop="name">ACME</span>
        </div>
        <span itemprop="creator">Carol</span>
    </div>
    """
    accessor = SchemaOrgAccessor(SchemaOrgParser.from_html(html))

    assert accessor.copyright() == "Copyright 2020 ACME"
    assert accessor.publisher() == "ACME"
    assert accessor.author() == "Carol"
    assert accessor.article().authors == ["Carol"]


def test_encoding_used_as_representative_image():
    html = """
    <div itemscope itemtype="http://schema.org/Article">
        <meta itemprop="image" content="https://example.com/own.jpg">
        <div itemprop="encoding" itemscope itemtype="http://schema.org/ImageObject">
            <meta itemprop="contentUrl" content="https://example.com/encoded.jpg">
            <meta itemprop="width" content="wide">
        </div>
    </div>
    <div itemscope itemtype="http://schema.org/ImageObject">
        <meta itemprop="contentUrl" content="https://example.com/other.jpg">
    </div>
    """
    parser = SchemaOrgParser.from_html(html)
    images = SchemaOrgAccessor(parser).images()

    assert [img.url for img in images] == [
        "https://example.com/encoded.jpg",
        "https://example.com/other.jpg",
    ]
    assert images[0].width is None


def test_non_image_associated_media_is_not_replaced_by_encoding():
    html = """
    <div itemscope itemtype="http://schema.org/Article">
        <meta itemprop="image" content="https://example.com/own.jpg">
        <div itemprop="associatedMedia" itemscope itemtype="http://schema.org/VideoObject">
            <meta itemprop="contentUrl" content="https://example.com/clip.mp4">
        </div>
        <div itemprop="encoding" itemscope itemtype="http://schema.org/ImageObject">
            <meta itemprop="contentUrl" content="https://example.com/encoded.jpg">
        </div>
    </div>
    """
    parser = SchemaOrgParser.from_html(html)
    article = parser.get_article_items()[0]

    assert article.get_representative_image_item() is None
    assert [img.url for img in SchemaOrgAccessor(parser).images()] == [
        "https://example.com/own.jpg",
        "https://example.com/encoded.jpg",
    ]
