# src/crawler/crawler.py
# Responsibility: Fetches raw HTML from a given URL over HTTP.

import httpx
from typing import Optional
from src.config.settings import settings

class WebCrawler:
    """
    Component responsible for network IO and content retrieval.
    Only HTML documents are returned; everything else is reported and dropped.
    """

    def __init__(self):
        self.timeout = settings.CRAWLER.REQUEST_TIMEOUT
        self.headers = {"User-Agent": settings.CRAWLER.USER_AGENT}

    def fetch(self, url: str) -> Optional[str]:
        """
        Fetches the page body.

        Args:
            url (str): Target URL.

        Returns:
            Optional[str]: HTML text, or None on failure.
        """
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url, headers=self.headers, follow_redirects=True)
                response.raise_for_status()

                content_type = response.headers.get("content-type", "").lower()
                if "text/html" not in content_type:
                    print(f"[Crawler] Skipped {url}: Non-HTML content ({content_type})")
                    return None

                return response.text

        except httpx.RequestError as e:
            print(f"[Crawler] Network error on {url}: {e}")
        except httpx.HTTPStatusError as e:
            print(f"[Crawler] HTTP {e.response.status_code} on {url}")
        except Exception as e:
            print(f"[Crawler] Unexpected error on {url}: {e}")

        return None
