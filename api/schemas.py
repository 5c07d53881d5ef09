"""
schemas.py - FastAPI request/response models.
Kept apart from contracts.py so the API can evolve independently.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import EvaluationResult, OperatorSet


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(..., max_length=10_000)
    operator_set: Optional[OperatorSet] = None  # None = configured default


class EvaluateResponse(BaseModel):
    expression: str
    operator_set: OperatorSet
    result: EvaluationResult
    message: str


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
