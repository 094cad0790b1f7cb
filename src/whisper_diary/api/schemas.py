"""Request and response schemas for API endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""
    
    error: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error code")
    status: int = Field(description="HTTP status code")
    request_id: str | None = Field(default=None, description="Request ID for tracing")
    details: dict[str, Any] | None = Field(default=None, description="Additional context")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "error": "Error processing files.",
                "code": "INVALID_QUOTING",
                "status": 422,
                "request_id": "550e8400-e29b-41d4-a716-446655440000",
                "details": {
                    "message": "One of your CSV files has invalid quote formatting.",
                    "line": 12,
                },
            }
        }
    }


class MergeResponse(BaseModel):
    """The three merged transcript renders."""
    
    csv: str = Field(description="One quoted CSV row per segment")
    markdown_with_timestamps: str = Field(description="Speaker blocks with timecodes")
    markdown_clean: str = Field(description="Speaker blocks, text only")
    filename: str = Field(description="Suggested filename stem for downloads")
    segment_count: int = Field(ge=0, description="Number of aligned segments")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "csv": '"speaker","startTime","endTime","text"\n"Alice","00;00;01;00","00;00;03;00","hello"\n',
                "markdown_with_timestamps": "**Alice**\n[00;00;01;00 - 00;00;03;00] hello\n\n",
                "markdown_clean": "**Alice**\nhello\n\n",
                "filename": "2024-05-01",
                "segment_count": 1,
            }
        }
    }
