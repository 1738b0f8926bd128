from .v1 import router as v1_router, get_gemini_service

__all__ = [
    "v1_router",
    "get_gemini_service",
]
