# backend/main.py
import logging
from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from typing import Optional
from .config import CONFIG
from .catalog import CatalogClient
from .errors import ValidationError, VodRelayError
from .http_client import HttpClient, http_client
from .proxy import fetch_proxied
from .api_models import EpisodesResponse, ErrorResponse

logging.basicConfig(level=getattr(logging, CONFIG["LOGGING_LEVEL"], logging.INFO))
logger = logging.getLogger(__name__)

app = FastAPI(title="vodrelay API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def get_http_client() -> HttpClient:
    return http_client


@app.exception_handler(VodRelayError)
async def vodrelay_error_handler(request: Request, exc: VodRelayError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/api/fc-proxy", responses=ERROR_RESPONSES)
def fc_proxy(
    url: Optional[str] = Query(default=None, description="Ziel-URL"),
    client: HttpClient = Depends(get_http_client),
):
    if not url:
        raise ValidationError("Missing url parameter")
    logger.info(f"Proxy angefordert: url='{url}'")
    try:
        resource = fetch_proxied(client, url)
    except VodRelayError:
        raise
    except Exception as e:
        logger.error(f"Proxy-Fehler fuer {url}: {e}", exc_info=True)
        raise VodRelayError("代理出错")

    headers = {"Cache-Control": CONFIG["PROXY_CACHE_CONTROL"]}
    if resource.content_type:
        headers["Content-Type"] = resource.content_type
    return Response(content=resource.body, status_code=200, headers=headers)


@app.get("/api/search-episodes", response_model=EpisodesResponse, responses=ERROR_RESPONSES)
def search_episodes(
    title: Optional[str] = Query(default=None, description="Titel"),
    year: Optional[str] = Query(default=None, description="Jahr, z.B. 2021"),
    stype: Optional[str] = Query(default=None, description="movie oder tv"),
    client: HttpClient = Depends(get_http_client),
):
    if not title:
        raise ValidationError("Missing title parameter")
    logger.info(f"Episoden-Suche angefordert: title='{title}', year='{year}', stype='{stype}'")
    try:
        return CatalogClient(client).resolve_episodes(title, year or None, stype or None)
    except VodRelayError:
        raise
    except Exception as e:
        logger.error(f"Fehler bei der Episoden-Suche fuer '{title}': {e}", exc_info=True)
        raise VodRelayError("Internal server error")


@app.get("/ping", response_class=PlainTextResponse)
async def ping():
    return "pong"


def run():
    import uvicorn
    uvicorn.run(app, host=CONFIG["HOST"], port=CONFIG["PORT"])


if __name__ == "__main__":
    run()
