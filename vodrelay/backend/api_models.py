# backend/api_models.py
from dataclasses import dataclass
from pydantic import BaseModel, ConfigDict
from typing import Dict, FrozenSet, List, Optional, Union

from .config import MOVIE_CATEGORIES, TV_CATEGORIES

# Upstream-Modelle (Katalog-API)
class CatalogSearchItem(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    vod_id: Union[int, str]
    vod_name: Optional[str] = ""
    type_id: Optional[Union[int, str]] = None
    type_name: Optional[str] = ""
    vod_time: Optional[str] = ""
    vod_remarks: Optional[str] = ""

class CatalogDetailItem(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    vod_id: Union[int, str]
    vod_name: Optional[str] = ""
    vod_year: Optional[str] = ""
    type_name: Optional[str] = ""
    vod_play_url: Optional[str] = None

class CatalogSearchResponse(BaseModel):
    code: Optional[int] = None
    list: Optional[List[CatalogSearchItem]] = None

class CatalogDetailResponse(BaseModel):
    code: Optional[int] = None
    list: Optional[List[CatalogDetailItem]] = None

# Ausgabemodelle
class EpisodesResponse(BaseModel):
    vod_id: Union[int, str]
    vod_name: Optional[str] = None
    vod_year: Optional[str] = None
    type_name: Optional[str] = None
    episodes: Dict[str, str] # Episoden-Nummer als String -> Abspiel-URL

class ErrorResponse(BaseModel):
    error: str

@dataclass(frozen=True)
class CategorySets:
    movie: FrozenSet[str] = MOVIE_CATEGORIES
    tv: FrozenSet[str] = TV_CATEGORIES

    def for_stype(self, stype: Optional[str]) -> Optional[FrozenSet[str]]:
        """Kategorien zum stype-Hinweis; None bei unbekanntem oder fehlendem Hinweis."""
        if stype == "movie":
            return self.movie
        if stype == "tv":
            return self.tv
        return None

DEFAULT_CATEGORIES = CategorySets()
