"""HTTP API for wordtally."""

from __future__ import annotations

from fastapi import FastAPI

from wordtally import __version__
from wordtally.config import load_config
from wordtally.core import run_count
from wordtally.models import CountRequest, CountResponse, HealthResponse


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="wordtally",
        version=__version__,
        description="Word frequency counting service API.",
    )
    config = load_config()

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.post("/v1/count", response_model=CountResponse, tags=["counting"])
    def count(request: CountRequest) -> CountResponse:
        if request.limit is None and config.default_limit is not None:
            request = request.model_copy(update={"limit": config.default_limit})
        return run_count(request)

    return app


app = create_app()
