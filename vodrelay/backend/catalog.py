# backend/catalog.py
"""
Katalog-Client: Suche nach Titel, Auswahl des besten Treffers und
Abruf der Detail-Daten inkl. Episoden-Links.
"""
import logging
from datetime import datetime
from typing import List, Optional
from urllib.parse import urlencode

from pydantic import BaseModel

from .api_models import (
    CatalogDetailItem, CatalogDetailResponse, CatalogSearchItem, CatalogSearchResponse,
    CategorySets, DEFAULT_CATEGORIES, EpisodesResponse,
)
from .config import CONFIG
from .errors import NotFoundError, UpstreamError
from .http_client import HttpClient
from .utils import parse_play_urls, parse_vod_time

logger = logging.getLogger(__name__)


def _vod_year(item: CatalogSearchItem) -> Optional[str]:
    parsed = parse_vod_time(item.vod_time)
    return str(parsed.year) if parsed else None


def find_best_match(
    results: List[CatalogSearchItem],
    year: Optional[str] = None,
    stype: Optional[str] = None,
    categories: CategorySets = DEFAULT_CATEGORIES,
    strict_type_filter: bool = CONFIG["STRICT_TYPE_FILTER"],
) -> Optional[CatalogSearchItem]:
    """
    Waehlt aus den Suchtreffern den passendsten Eintrag.
    Reihenfolge: Typ-Filter, Jahres-Filter, dann neuester vod_time zuerst.
    Args:
        results (list): Suchtreffer in Upstream-Reihenfolge.
        year (str): Optionales Jahr, z.B. '2021'.
        stype (str): 'movie' oder 'tv'; andere Werte filtern nicht.
        categories (CategorySets): Kategorie-Namen je stype.
        strict_type_filter (bool): True behaelt einen leeren Typ-Filter bei
            (dann gewinnt der erste Treffer), False ignoriert ihn.
    Returns:
        CatalogSearchItem | None: Bester Treffer, None bei leerer Liste.
    """
    if not results:
        return None
    if len(results) == 1:
        return results[0]

    filtered = list(results)

    # Nach Typ filtern
    allowed = categories.for_stype(stype)
    if allowed is not None:
        by_type = [item for item in filtered if item.type_name in allowed]
        if by_type or strict_type_filter:
            filtered = by_type
        else:
            logger.debug(f"Typ-Filter '{stype}' wuerde alle {len(filtered)} Treffer entfernen, wird ignoriert")

    # Nach Jahr filtern
    if year and len(filtered) > 1:
        by_year = [item for item in filtered if _vod_year(item) == year]
        if by_year:
            filtered = by_year

    # Neueste zuerst
    if len(filtered) > 1:
        filtered = sorted(filtered, key=lambda item: parse_vod_time(item.vod_time) or datetime.min, reverse=True)

    return filtered[0] if filtered else results[0]


class CatalogClient:
    def __init__(self, client: HttpClient, api_url: str = CONFIG["CATALOG_API_URL"]):
        self.client = client
        self.api_url = api_url
        self.headers = {"User-Agent": CONFIG["HELPER_USER_AGENT"]}

    def _get(self, params: dict, model: type[BaseModel], failure_message: str):
        url = f"{self.api_url}?{urlencode(params)}"
        logger.debug(f"Katalog-Abfrage: {url}")
        response = self.client.fetch(url, headers=self.headers)
        if not response.ok:
            logger.warning(f"Katalog-API antwortete mit {response.status} fuer {params}")
            raise UpstreamError(response.status, failure_message)
        return model(**response.json())

    def search(self, title: str) -> List[CatalogSearchItem]:
        data = self._get({"ac": "list", "wd": title}, CatalogSearchResponse, "Search request failed")
        if data.code != CONFIG["CATALOG_OK_CODE"] or not data.list:
            raise NotFoundError("No results found")
        logger.info(f"{len(data.list)} Treffer fuer '{title}'")
        return data.list

    def detail(self, vod_id) -> CatalogDetailItem:
        data = self._get({"ac": "detail", "ids": vod_id}, CatalogDetailResponse, "Detail request failed")
        if data.code != CONFIG["CATALOG_OK_CODE"] or not data.list:
            raise NotFoundError("No detail found")
        return data.list[0]

    def resolve_episodes(
        self,
        title: str,
        year: Optional[str] = None,
        stype: Optional[str] = None,
        categories: CategorySets = DEFAULT_CATEGORIES,
    ) -> EpisodesResponse:
        results = self.search(title)

        best = find_best_match(results, year, stype, categories, CONFIG["STRICT_TYPE_FILTER"])
        if best is None:
            raise NotFoundError("No matching result found")
        logger.info(f"Bester Treffer fuer '{title}': {best.vod_name} (id={best.vod_id}, {best.type_name}, {best.vod_time})")

        detail = self.detail(best.vod_id)
        episodes = parse_play_urls(detail.vod_play_url)
        logger.info(f"{len(episodes)} Episoden fuer '{detail.vod_name}' geparst")
        return EpisodesResponse(
            vod_id=detail.vod_id,
            vod_name=detail.vod_name,
            vod_year=detail.vod_year,
            type_name=detail.type_name,
            episodes=episodes,
        )
