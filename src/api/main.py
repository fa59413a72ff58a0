import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, List, Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from advisor.categories import AdvisoryCategory, list_categories
from advisor.errors import AdvisoryBackendError
from advisor.service import AdvisorService, describe_category, log_welcome
from api.config import AppConfig, load_config
from api.schemas import AdvisoryCategorySchema, AdvisoryEnvelope, AdvisoryResult, HealthResponse
from framework.llm.client import GeminiClient, LLMClient
from framework.llm.config import GeminiConfig
from framework.logging_utils import configure_logging


logger = logging.getLogger(__name__)

WELCOME_SHUTDOWN_GRACE_SECONDS = 5.0


def create_app(
    client: Optional[LLMClient] = None,
    config: Optional[AppConfig] = None,
) -> FastAPI:
    """Build the advisor API around an explicitly constructed backend client.

    Without a client, a Gemini client is built from the environment, so a
    missing ``GEMINI_API_KEY`` fails here, before any request is served.
    """
    config = config or load_config()
    configure_logging(config.log_level)
    if client is None:
        client = GeminiClient(GeminiConfig.from_env())
    service = AdvisorService(client)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        welcome_task = None
        if config.welcome_on_startup:
            # Startup does not wait on the backend.
            welcome_task = asyncio.create_task(run_in_threadpool(log_welcome, service))
        logger.info("Available endpoints:")
        for category in list_categories():
            logger.info("  %s", describe_category(category))
        yield
        if welcome_task is not None:
            _, pending = await asyncio.wait({welcome_task}, timeout=WELCOME_SHUTDOWN_GRACE_SECONDS)
            for task in pending:
                task.cancel()

    app = FastAPI(title="Diabetes AI Advisor", version="1.0", lifespan=lifespan)
    app.state.advisor = service
    _configure_cors(app, config.cors_origins)

    @app.get("/api/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse()

    @app.get("/api/advisories", response_model=List[AdvisoryCategorySchema])
    def advisories() -> List[AdvisoryCategorySchema]:
        return [_category_to_schema(category) for category in list_categories()]

    for category in list_categories():
        app.add_api_route(
            category.path,
            _build_advisory_route(service, category),
            methods=["POST"],
            response_model=AdvisoryResult[category.response_model],
            name=category.name,
            summary=category.description,
        )

    return app


def _configure_cors(app: FastAPI, origins: List[str]) -> None:
    if origins == ["*"]:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    elif origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )


def _build_advisory_route(service: AdvisorService, category: AdvisoryCategory) -> Callable:
    envelope_model = AdvisoryEnvelope[category.request_model]

    def advisory_route(payload: envelope_model) -> dict:
        try:
            response = service.advise(category.id, payload.data)
        except AdvisoryBackendError as exc:
            logger.exception("Advisory %s failed: %s", category.id, exc)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.context
            ) from exc
        return {"result": response}

    advisory_route.__name__ = f"{category.id}_route"
    return advisory_route


def _category_to_schema(category: AdvisoryCategory) -> AdvisoryCategorySchema:
    return AdvisoryCategorySchema(
        id=category.id,
        name=category.name,
        path=category.path,
        description=category.description,
    )
