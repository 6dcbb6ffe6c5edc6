"""Shared data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class CountRequest(BaseModel):
    """Word count request payload used by both CLI and API."""

    text: str = ""
    limit: int | None = Field(default=None, ge=1)
    min_count: int = Field(default=1, ge=1)


class WordCount(BaseModel):
    """Occurrences of one normalized word."""

    word: str = Field(min_length=1)
    count: int = Field(ge=1)


class CountMetadata(BaseModel):
    """Metadata describing how a word count was produced."""

    normalizer_id: str
    tie_break: Literal["first_occurrence"]
    token_count: int = Field(ge=0)
    dropped_token_count: int = Field(ge=0)
    word_count: int = Field(ge=0)
    distinct_word_count: int = Field(ge=0)
    generated_at: datetime


class CountResponse(BaseModel):
    """Canonical word count output schema."""

    metadata: CountMetadata
    words: list[WordCount]
