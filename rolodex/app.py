# ============================================================
# Rolodex Search FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Person / note snapshots (flat JSON files or the notes app API)
#   - Search engine (scoring, graph expansion, dedup)
#   - Read-only listing routes and health checks
# ============================================================

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# --- Local imports ---
from rolodex.errors import InvalidQuery, InvalidRequestBody, RolodexError, StorageUnavailable
from rolodex.log import setup_logging
from rolodex.search import SearchEngine, load_tuning
from rolodex.settings import settings
from rolodex.storage import Repository, build_repository

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("rolodex.app")


# ------------------------------------------------------------
# 🧠 Dependencies: storage + engine, built once per process
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_repository() -> Repository:
    return build_repository(settings)


@lru_cache(maxsize=1)
def get_engine() -> SearchEngine:
    return SearchEngine(
        repository=get_repository(),
        tuning=load_tuning(settings.SEARCH_TUNING_PATH),
        workers=settings.SEARCH_WORKERS,
    )


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Rolodex Search API", version="0.3")


def error_response(err: RolodexError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content={"success": False, "error": str(err)})


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.warning("invalid request body", extra={"fields": {"path": request.url.path, "errors": exc.errors()}})
    return error_response(InvalidRequestBody("Invalid request body"))


# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class SearchRequest(BaseModel):
    query: Optional[str] = None
    personId: Optional[str] = None


class SearchResponse(BaseModel):
    success: bool
    data: List[Dict[str, Any]]
    totalResults: int


class ListResponse(BaseModel):
    success: bool
    data: List[Dict[str, Any]]


# ------------------------------------------------------------
# 🔎 Search route
# ------------------------------------------------------------
@app.post("/search", response_model=SearchResponse)
def search(req: SearchRequest, engine: SearchEngine = Depends(get_engine)):
    try:
        results = engine.search(req.query, person_id=req.personId)
    except InvalidQuery as e:
        return error_response(e)
    except StorageUnavailable as e:
        logger.error("storage read failed", extra={"fields": {"error": str(e)}})
        return error_response(e)
    except Exception as e:
        logger.exception("search failed")
        return JSONResponse(status_code=500, content={"success": False, "error": str(e)})

    return {"success": True, "data": results, "totalResults": len(results)}


# ------------------------------------------------------------
# 📇 Read-only listings
# ------------------------------------------------------------
@app.get("/persons", response_model=ListResponse)
def list_persons(repo: Repository = Depends(get_repository)):
    try:
        persons = repo.find_all_persons()
    except StorageUnavailable as e:
        return error_response(e)
    return {"success": True, "data": [p.to_wire() for p in persons]}


@app.get("/notes", response_model=ListResponse)
def list_notes(
    person_id: Optional[str] = Query(None, alias="personId", description="Only this person's notes"),
    repo: Repository = Depends(get_repository),
):
    try:
        notes = repo.find_notes_by_person_id(person_id) if person_id else repo.find_all_notes()
    except StorageUnavailable as e:
        return error_response(e)
    return {"success": True, "data": [n.to_wire() for n in notes]}


# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "storage": settings.STORAGE_BACKEND,
    }


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}


@app.get("/")
def hello():
    return {"message": "Rolodex search service running."}
