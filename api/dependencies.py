"""
dependencies.py - FastAPI dependency injection.
Each dependency reads its adapter from Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.evaluator.state_machine_evaluator import StateMachineEvaluator
from config import Settings
from contracts import OperatorSet


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_evaluators(request: Request) -> dict[OperatorSet, StateMachineEvaluator]:
    return request.app.state.evaluators
