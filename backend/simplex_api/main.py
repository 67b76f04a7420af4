from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from simplex_api.api.v1.router import router as v1_router
from simplex_api.core.config import get_settings, setup_logging
from simplex_api.core.errors import BackendError, DomainError, EngineUnreachable


def create_app() -> FastAPI:
    setup_logging(get_settings().LOG_LEVEL)

    app = FastAPI(title="Simplex Calculator API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DomainError)
    def domain_error_handler(_, exc: DomainError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(EngineUnreachable)
    @app.exception_handler(BackendError)
    def remote_error_handler(_, exc: Exception):
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    app.include_router(v1_router, prefix="/v1")
    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "simplex_api.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.RELOAD,
    )


app = create_app()

if __name__ == "__main__":  # pragma: no cover
    run()
