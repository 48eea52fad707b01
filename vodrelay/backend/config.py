# backend/config.py
import os

# Basis-Konfiguration
CONFIG = {
    "FC_HELPER_URL": "https://fc.lyz05.cn/",
    "CATALOG_API_URL": "https://www.caiji.cyou/api.php/provide/vod/",
    # Hosts, deren Redirect-Kette ueber den Helper aufgeloest wird
    "SPECIAL_PLATFORM_HOSTS": ("bilibili.com",),
    # Location-Ziele, die direkt abgerufen werden
    "REDIRECT_TARGET_DOMAINS": ("comment.bilibili.com",),
    "HELPER_USER_AGENT": 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36',
    "PROXY_USER_AGENT": 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/138.0.0.0 Safari/537.36',
    "PROXY_CACHE_CONTROL": "public, max-age=3600",
    "CATALOG_OK_CODE": 1,
    # True: leerer Typ-Filter bleibt leer, dann gewinnt der erste Suchtreffer
    "STRICT_TYPE_FILTER": True,
    "HTTP_TIMEOUT_SEC": None,  # None = Default von requests
    "LOGGING_LEVEL": os.getenv("VODRELAY_LOGGING_LEVEL", "INFO").upper(),
    "HOST": os.getenv("VODRELAY_HOST", "0.0.0.0"),
    "PORT": int(os.getenv("VODRELAY_PORT", "8080")),
}

# Kategorien des Katalogs (werden 1:1 vom Upstream geliefert)
MOVIE_CATEGORIES = frozenset([
    "电影", "动作片", "喜剧片", "爱情片", "科幻片", "剧情片", "战争片", "犯罪片",
    "惊悚片", "冒险片", "悬疑片", "奇幻片", "纪录片", "其他片", "动画片",
])
TV_CATEGORIES = frozenset([
    "电视剧", "国产剧", "港台剧", "欧美剧", "日韩剧", "其他剧",
])
