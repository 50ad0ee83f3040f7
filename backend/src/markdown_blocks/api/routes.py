"""API routes: parse, render and uploaded documents."""

from __future__ import annotations

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from ..models import BlockListResponse, ParseRequest, RenderResponse, UploadResponse
from ..services.block_converter import build_render_units
from ..services.input_layer import get_upload, save_upload
from ..services.markdown_parser import parse_markdown_to_blocks

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])

_ALLOWED_SUFFIXES = (".md", ".txt")


def _block_list(markdown: str) -> BlockListResponse:
    blocks = parse_markdown_to_blocks(markdown)
    return BlockListResponse(blocks=[b.to_dict() for b in blocks], count=len(blocks))


def _uploaded_markdown(file_id: str) -> str:
    upload = get_upload(file_id)
    if upload is None:
        raise HTTPException(404, "Upload not found")
    return upload.get("content", "")


@router.post("/parse", response_model=BlockListResponse)
async def api_parse(body: ParseRequest):
    """Parse Markdown text into blocks."""
    return _block_list(body.markdown)


@router.post("/render", response_model=RenderResponse)
async def api_render(body: ParseRequest):
    """Parse Markdown text and return keyed render units."""
    units = build_render_units(parse_markdown_to_blocks(body.markdown))
    return RenderResponse(units=units)


@router.post("/upload", response_model=UploadResponse)
async def api_upload(file: UploadFile = File(...)):
    """Upload a Markdown file. Returns file_id, preview_markdown and block count."""
    if not file.filename or not file.filename.endswith(_ALLOWED_SUFFIXES):
        raise HTTPException(400, "File must be .md or .txt")
    content = await file.read()
    text = content.decode("utf-8", errors="replace")
    result = save_upload(text, file.filename)
    block_count = len(parse_markdown_to_blocks(text))
    logger.info("Upload %s parsed into %d blocks", result["file_id"], block_count)
    return UploadResponse(**result, block_count=block_count)


@router.get("/uploads/{file_id}/blocks", response_model=BlockListResponse)
async def api_upload_blocks(file_id: str):
    return _block_list(_uploaded_markdown(file_id))


@router.get("/uploads/{file_id}/render", response_model=RenderResponse)
async def api_upload_render(file_id: str):
    units = build_render_units(parse_markdown_to_blocks(_uploaded_markdown(file_id)))
    return RenderResponse(units=units)
