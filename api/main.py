"""
api/main.py - FastAPI entry point.

create_app():
  - Builds one stateless evaluator per operator set and shares it
    across requests (evaluators keep no state between calls)

Lifespan:
  - Logs the default operator set on startup, and logs shutdown
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from adapters.evaluator.state_machine_evaluator import StateMachineEvaluator
from api.routers import evaluate
from api.schemas import HealthResponse
from config import Settings
from contracts import OperatorSet

logger = logging.getLogger("rpncalc")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Default operator set: %s", settings.operator_set.value)
    logger.info("rpncalc API ready.")
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.evaluators = {
        operator_set: StateMachineEvaluator(operator_set) for operator_set in OperatorSet
    }

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    return app


app = create_app()
