"""API route exports."""

from .transcripts import router as transcripts_router
from .upload import router as upload_router

__all__ = ["transcripts_router", "upload_router"]
