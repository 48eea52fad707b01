# backend/utils.py
"""
Utilities for the backend: Parsen der Zeitstempel und der Abspiel-URLs
aus den Katalog-Antworten.
"""
import logging
import re
from datetime import datetime, timezone
from typing import Dict, Optional

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"\d+", re.ASCII)

_VOD_TIME_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M", "%Y-%m-%d", "%Y/%m/%d %H:%M:%S", "%Y/%m/%d")


def parse_vod_time(value: Optional[str]) -> Optional[datetime]:
    """
    Parst das vod_time-Feld des Katalogs.
    Args:
        value (str): Zeitstempel, z.B. '2023-05-01 12:00:00'.
    Returns:
        datetime | None: Der Zeitpunkt, oder None wenn das Feld leer oder unlesbar ist.
    """
    if not value or not isinstance(value, str):
        return None
    value = value.strip()
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        parsed = None
    if parsed is not None:
        # aware und naive Werte muessen vergleichbar bleiben
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed
    for fmt in _VOD_TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    logger.debug(f"Unlesbarer vod_time-Wert: '{value}'")
    return None


def parse_play_urls(vod_play_url: Optional[str]) -> Dict[str, str]:
    """
    Zerlegt 'label$url#label$url...' in ein Mapping Episoden-Nummer -> URL.
    Reine Zahlen bleiben unveraendert, sonst zaehlt die erste Ziffernfolge
    im Label, Labels ohne Ziffern werden zu "1". Spaetere Eintraege
    ueberschreiben fruehere mit gleichem Schluessel.
    """
    episodes: Dict[str, str] = {}
    if not vod_play_url:
        return episodes

    for entry in vod_play_url.split("#"):
        parts = entry.split("$")
        episode = parts[0]
        url = parts[1] if len(parts) > 1 else ""
        if not episode or not url:
            continue
        label = episode.strip()
        if label.isdigit() and label.isascii():
            episodes[label] = url
            continue
        match = _DIGITS_RE.search(label)
        if match:
            episodes[match.group(0)] = url
        else:
            episodes["1"] = url
    return episodes
