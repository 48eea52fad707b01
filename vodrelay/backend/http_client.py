# backend/http_client.py
"""
Duenne Huelle um requests.Session. Die Handler sprechen nur mit fetch(),
damit Tests einen Fake-Transport einsetzen koennen.
"""
import logging
from typing import Dict, Optional

import requests

from .config import CONFIG

logger = logging.getLogger(__name__)


class FetchResponse:
    """Lesesicht auf eine requests.Response; Body ohne charset gilt als UTF-8."""

    def __init__(self, response: requests.Response):
        content_type = response.headers.get("content-type", "")
        if "charset" not in content_type.lower():
            response.encoding = "utf-8"
        self._response = response

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def reason(self) -> str:
        return self._response.reason or ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def content(self) -> bytes:
        return self._response.content

    @property
    def text(self) -> str:
        return self._response.text

    def header(self, name: str) -> Optional[str]:
        return self._response.headers.get(name)

    def json(self):
        return self._response.json()


class HttpClient:
    def __init__(self, timeout: Optional[float] = CONFIG.get("HTTP_TIMEOUT_SEC")):
        self.timeout = timeout
        self.session = requests.Session()

    def fetch(self, url: str, headers: Optional[Dict[str, str]] = None, follow_redirects: bool = True) -> FetchResponse:
        """
        Fuehrt einen GET aus und liest den kompletten Body.
        Args:
            url (str): Ziel-URL.
            headers (dict): Zusaetzliche Request-Header.
            follow_redirects (bool): False, um 3xx-Antworten selbst auszuwerten.
        Returns:
            FetchResponse: Status, Statustext, Header und Body.
        """
        logger.debug(f"GET {url} (follow_redirects={follow_redirects})")
        response = self.session.get(url, headers=headers or {}, allow_redirects=follow_redirects, timeout=self.timeout)
        logger.debug(f"Antwort {response.status_code} von {url}")
        return FetchResponse(response)


# Globale Instanz
http_client = HttpClient()
