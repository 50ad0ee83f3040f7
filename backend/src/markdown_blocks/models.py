"""Pydantic models for API request/response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    markdown: str


class BlockListResponse(BaseModel):
    blocks: list[dict[str, Any]] = Field(default_factory=list)
    count: int


class RenderResponse(BaseModel):
    units: list[dict[str, Any]] = Field(default_factory=list)


class UploadResponse(BaseModel):
    file_id: str
    preview_markdown: str
    block_count: int
