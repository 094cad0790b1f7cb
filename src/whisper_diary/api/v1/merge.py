"""Transcript merge endpoint."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from whisper_diary.api.deps import Config, Merger
from whisper_diary.api.schemas import MergeResponse
from whisper_diary.pipeline import default_stem

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_upload_text(
    file: UploadFile,
    max_size: int,
    allowed_extensions: set[str],
    chunk_size: int = 64 * 1024,
) -> str:
    """Read an uploaded CSV file into memory as UTF-8 text.
    
    Args:
        file: Uploaded file
        max_size: Maximum file size in bytes
        allowed_extensions: Set of allowed extensions (e.g., {'.csv'})
        chunk_size: Read size per await
    
    Returns:
        Decoded file contents (may be blank; the merger rejects that)
        
    Raises:
        HTTPException: If validation fails
    """
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Filename required", "code": "INVALID_REQUEST"},
        )
    
    suffix = Path(file.filename).suffix.lower()
    if suffix not in allowed_extensions:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": f"Unsupported file format: {suffix or 'none'}",
                "code": "INVALID_FILE_TYPE",
                "allowed": sorted(allowed_extensions),
            },
        )
    
    data = bytearray()
    while chunk := await file.read(chunk_size):
        data.extend(chunk)
        if len(data) > max_size:
            max_mb = max_size / (1024 * 1024)
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail={
                    "error": f"File too large (max {max_mb:.0f}MB)",
                    "code": "FILE_TOO_LARGE",
                    "max_bytes": max_size,
                },
            )
    
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": f"{file.filename} is not UTF-8 text",
                "code": "INVALID_ENCODING",
            },
        ) from e


@router.post(
    "/merge",
    response_model=MergeResponse,
    summary="Merge a Whisper transcript with Premiere speaker markers",
)
async def merge_uploads(
    whisper: Annotated[UploadFile, File(description="Whisper CSV (start, end, text)")],
    premiere: Annotated[UploadFile, File(description="Premiere CSV (Speaker Name, Start Time, End Time, Text)")],
    config: Config,
    merger: Merger,
) -> MergeResponse:
    """Attribute each Whisper segment to the Premiere speaker active at its midpoint.
    
    Returns the merged transcript as CSV and as two Markdown layouts.
    """
    upload = config.upload
    whisper_text = await read_upload_text(
        whisper, upload.max_size_bytes, upload.allowed_extensions, upload.chunk_size
    )
    premiere_text = await read_upload_text(
        premiere, upload.max_size_bytes, upload.allowed_extensions, upload.chunk_size
    )
    
    result = merger.merge(whisper_text, premiere_text)
    
    logger.info(
        f"Merged {result.segment_count} segments "
        f"(whisper={whisper.filename}, premiere={premiere.filename})"
    )
    
    return MergeResponse(
        csv=result.csv,
        markdown_with_timestamps=result.markdown_with_timestamps,
        markdown_clean=result.markdown_clean,
        filename=default_stem(),
        segment_count=result.segment_count,
    )
