# main.py
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog
from raiku_quiz.core.logging import configure_logging
from raiku_quiz.core.settings import get_settings
from raiku_quiz.core.telemetry import init_telemetry
from raiku_quiz.api import answers, quizzes
from raiku_quiz.api.dependencies import get_llm_client
from raiku_quiz.services.llm_client import GeminiClient

def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    log = structlog.get_logger()

    app = FastAPI(
        title=settings.app_name,
        openapi_url=f"{settings.api_prefix}/openapi.json",
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc"
    )
    init_telemetry(app)

    # CORS (adjust for prod)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    # Global error handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        log.error("unhandled_error",
                path=request.url.path,
                method=request.method,
                error=str(exc))

        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error. Please try again later."}
        )

    @app.get("/livez", tags=["System Health"])
    async def liveness():
        return {"status": "alive"}

    @app.get("/readyz", tags=["System Health"])
    async def readiness(client: GeminiClient = Depends(get_llm_client)):
        return {
            "status": "ready",
            "llm_configured": client.configured,
            "api_prefix": settings.api_prefix
        }

    if not settings.gemini_api_key.strip():
        log.info("app.offline_mode", message="GEMINI_API_KEY not set, serving static answers and quizzes")

    # Mount routers with prefix
    app.include_router(answers.router, prefix=settings.api_prefix)
    app.include_router(quizzes.router, prefix=settings.api_prefix)

    log.info("app.started")
    return app

# Create app instance for uvicorn
app = create_app()
