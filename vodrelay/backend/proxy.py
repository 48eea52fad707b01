# backend/proxy.py
"""
Proxy ueber den fc-Helper: Fuer bilibili wird die Redirect-Kette des
Helpers ausgewertet, alles andere geht direkt durch den Helper.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode, urlparse

from .config import CONFIG
from .errors import UpstreamError
from .http_client import HttpClient

logger = logging.getLogger(__name__)


@dataclass
class ProxiedResource:
    body: bytes
    content_type: Optional[str] = None


def build_helper_url(url: str) -> str:
    return f"{CONFIG['FC_HELPER_URL']}?{urlencode({'url': url})}"


def is_special_platform(url: str) -> bool:
    """Prueft, ob der Host der URL zu einer Plattform mit Sonderbehandlung gehoert."""
    host = (urlparse(url).hostname or "").lower()
    for domain in CONFIG["SPECIAL_PLATFORM_HOSTS"]:
        if host == domain or host.endswith("." + domain):
            return True
    return False


def resolve_target_url(client: HttpClient, url: str) -> str:
    """
    Bestimmt die URL, die letztlich abgerufen wird.
    Bei bilibili wird der Helper ohne Redirect-Folgen angefragt und ein
    Location-Header auf die Kommentar-Domain direkt uebernommen.
    Args:
        client (HttpClient): Transport.
        url (str): Original-URL des Aufrufers.
    Returns:
        str: Die Location des Helpers oder die Helper-URL selbst.
    """
    helper_url = build_helper_url(url)
    if not is_special_platform(url):
        return helper_url

    response = client.fetch(
        helper_url,
        headers={"User-Agent": CONFIG["HELPER_USER_AGENT"]},
        follow_redirects=False,
    )
    location = response.header("location")
    if location and any(domain in location for domain in CONFIG["REDIRECT_TARGET_DOMAINS"]):
        logger.info(f"Helper leitet weiter auf {location}")
        return location
    logger.debug(f"Keine verwertbare Weiterleitung vom Helper (Status {response.status}), nutze {helper_url}")
    return helper_url


def fetch_proxied(client: HttpClient, url: str) -> ProxiedResource:
    target_url = resolve_target_url(client, url)
    response = client.fetch(target_url, headers={"User-Agent": CONFIG["PROXY_USER_AGENT"]})
    if not response.ok:
        logger.warning(f"Ziel {target_url} antwortete mit {response.status} {response.reason}")
        raise UpstreamError(response.status, response.reason)
    return ProxiedResource(body=response.content, content_type=response.header("content-type"))
