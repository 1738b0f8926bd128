from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from typing import Optional
import logging
import os
import time

# Load environment variables from .env file
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

from app.routers import v1_router
from app.services import GeminiService

VERSION = "1.0.0"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001,http://127.0.0.1:3000,http://127.0.0.1:3001"


def create_app(gemini_service: Optional[GeminiService] = None) -> FastAPI:
    """Build the API with a single Gemini service shared by all requests"""
    app = FastAPI(title="Vocabulary Tutor Service", version=VERSION)
    app.state.gemini_service = gemini_service or GeminiService()

    # Add CORS middleware
    origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        logger.info(f"Incoming request: {request.method} {request.url.path}")
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.info(f"Completed request: {request.method} {request.url.path} with {response.status_code} in {process_time:.2f} seconds")
        return response

    # Include routers
    app.include_router(v1_router)

    @app.get("/")
    async def root():
        """Root endpoint with service status"""
        service = app.state.gemini_service
        return {
            "status": "ok",
            "service": "vocabulary-tutor",
            "version": VERSION,
            "gemini_available": service.available,
            "gemini_error": service.error if not service.available else None,
            "text_model": service.text_model,
            "image_model": service.image_model,
            "tts_model": service.tts_model,
        }

    @app.get("/health")
    async def health():
        """Health check endpoint"""
        available = app.state.gemini_service.available
        return {
            "status": "healthy" if available else "degraded",
            "service": "vocabulary-tutor",
            "version": VERSION,
            "gemini_available": available,
        }

    @app.get("/info")
    async def info():
        """Get service information"""
        return {
            "service": "Vocabulary Tutor Service",
            "version": VERSION,
            "description": "Definitions, illustrations, speech, dialogues and quick tutor answers using Gemini",
            "gemini_available": app.state.gemini_service.available,
            "endpoints": {
                "health": "GET /health",
                "info": "GET /info",
                "definition": "POST /api/v1/definition",
                "image": "POST /api/v1/image",
                "speech": "POST /api/v1/speech",
                "story": "POST /api/v1/story",
                "quick_answer": "POST /api/v1/quick-answer",
            }
        }

    return app


app = create_app()
