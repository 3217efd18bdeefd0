"""Pydantic payloads exchanged by the synonym API."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


# Request payloads

class AddSynonymsRequest(BaseModel):
    words: List[str] = Field(default_factory=list)


# API payloads

class SynonymsResponsePayload(BaseModel):
    word: str
    synonyms: List[str] = Field(default_factory=list)


class SynonymGroupsResponsePayload(BaseModel):
    groups: List[List[str]] = Field(default_factory=list)


class HealthPayload(BaseModel):
    status: str = "ok"
    message: str = "Synonym backend is running"
    words: int = 0
    groups: int = 0
