"""API configuration with Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UploadSettings(BaseModel):
    """File upload settings."""
    
    max_size_mb: float = Field(default=10.0, gt=0, le=200)
    allowed_extensions: set[str] = {".csv", ".txt"}
    chunk_size: int = Field(default=64 * 1024, description="64KB chunks")
    
    @property
    def max_size_bytes(self) -> int:
        return int(self.max_size_mb * 1024 * 1024)


class APIConfig(BaseModel):
    """Complete API configuration."""
    
    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    
    # Feature flags
    enable_docs: bool = True
    enable_cors: bool = True
    cors_origins: list[str] = ["*"]
    
    upload: UploadSettings = UploadSettings()


# Default configuration
DEFAULT_API_CONFIG = APIConfig()
