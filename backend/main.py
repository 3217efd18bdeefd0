"""FastAPI entrypoint for the synonym backend."""

from __future__ import annotations

import asyncio
import logging

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware

from app_state import SynonymAppState
from config import Settings
from models import AddSynonymsRequest, HealthPayload, SynonymGroupsResponsePayload, SynonymsResponsePayload
from synonym_index import InvalidArgument

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings.from_env()
configure_logging(settings)

app = FastAPI(title="Synonym Backend", description="In-memory synonym dictionary API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["HEAD", "GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)

state = SynonymAppState(settings)


@app.get("/", response_model=HealthPayload, tags=["health"])
async def root():
    stats = state.current().synonyms.stats()
    return HealthPayload(words=stats.words, groups=stats.groups)


@app.get("/health", response_model=HealthPayload, tags=["health"])
async def health():
    return await root()


@app.post("/synonyms", status_code=204, tags=["synonyms"])
async def add_synonyms(request: AddSynonymsRequest):
    try:
        await asyncio.to_thread(state.current().synonyms.add, request)
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.exception("Adding synonyms failed")
        raise HTTPException(status_code=500, detail=str(exc))
    return Response(status_code=204)


@app.get("/synonyms", response_model=SynonymsResponsePayload, tags=["synonyms"])
async def get_synonyms(word: str = Query(...)):
    try:
        return await asyncio.to_thread(state.current().synonyms.lookup, word)
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.exception("Synonym lookup failed for %r", word)
        raise HTTPException(status_code=500, detail=str(exc))


@app.get("/synonyms/groups", response_model=SynonymGroupsResponsePayload, tags=["synonyms"])
async def synonym_groups():
    try:
        return await asyncio.to_thread(state.current().synonyms.groups)
    except Exception as exc:
        logger.exception("Listing synonym groups failed")
        raise HTTPException(status_code=500, detail=str(exc))


@app.delete("/synonyms", status_code=204, tags=["admin"])
async def clear_synonyms():
    try:
        await asyncio.to_thread(state.current().synonyms.clear)
    except Exception as exc:
        logger.exception("Clearing synonyms failed")
        raise HTTPException(status_code=500, detail=str(exc))
    return Response(status_code=204)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
