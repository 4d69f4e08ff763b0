from pydantic_settings import BaseSettings

class ServerSettings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

class CrawlerSettings(BaseSettings):
    USER_AGENT: str = "MicrodataMetadataBot/1.0"
    REQUEST_TIMEOUT: int = 10

class ExtractorSettings(BaseSettings):
    # BeautifulSoup tree builder used for microdata scanning
    HTML_PARSER: str = "html.parser"
    # Upper bound for documents posted to /metadata/extract
    MAX_HTML_CHARS: int = 2_000_000

class AppSettings(BaseSettings):
    SERVER: ServerSettings = ServerSettings()
    CRAWLER: CrawlerSettings = CrawlerSettings()
    EXTRACTOR: ExtractorSettings = ExtractorSettings()

    VERSION: str = "1.0.0"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = AppSettings()
