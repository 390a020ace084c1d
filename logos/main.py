from typing import List, Optional

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from logos.config import Settings
from logos.errors import AnalysisError
from logos.logger import get_logger, set_level
from logos.models import AnalysisRequest, AnalysisResult, ErrorResponse, ProviderInfo
from logos.services.analyzer import Analyzer

log = get_logger()


def create_app(settings: Optional[Settings] = None, analyzer: Optional[Analyzer] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    set_level(settings.logging_level)
    analyzer = analyzer or Analyzer(settings)

    app = FastAPI(title="Logos Argument Analyzer")
    app.state.analyzer = analyzer

    # The frontend is hosted separately, so the API has to answer cross-origin calls
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-History-Key"],
    )

    @app.get("/api/health")
    async def health():
        """Simple health check endpoint for deployment verification."""
        return {"status": "ok"}

    @app.get("/api/models", response_model=List[ProviderInfo])
    async def models():
        return analyzer.describe_providers()

    @app.post(
        "/api/analyze",
        response_model=AnalysisResult,
        responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    )
    async def analyze(request: AnalysisRequest, response: Response):
        """
        Break an argument into claim, premises and emotional tone using the chosen provider.
        The provider call blocks, so it runs in the threadpool.
        X-History-Key carries the label the client stores the result under.
        """
        try:
            result = await run_in_threadpool(analyzer.analyze, request)
            response.headers["X-History-Key"] = request.history_label
            return result
        except AnalysisError as e:
            raise HTTPException(status_code=e.status_code, detail=e.message)
        except Exception:
            log.exception("Unexpected error analyzing argument with %s", request.model.value)
            raise HTTPException(status_code=500, detail="Failed to analyze argument")

    return app


app = create_app()
