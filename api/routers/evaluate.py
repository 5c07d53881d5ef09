"""
Router: POST /evaluate
Evaluation errors are part of the response body, never an HTTP error.
The only HTTP error is 422 for input that cannot round-trip through UTF-8 JSON
(lone surrogates).
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from adapters.evaluator.state_machine_evaluator import StateMachineEvaluator
from adapters.result_formatter import describe_result
from api.dependencies import get_evaluators, get_settings
from api.schemas import EvaluateRequest, EvaluateResponse
from config import Settings
from contracts import OperatorSet

logger = logging.getLogger("rpncalc.api")

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


def _has_lone_surrogate(text: str) -> bool:
    return any("\ud800" <= c <= "\udfff" for c in text)


@router.post("", response_model=EvaluateResponse)
async def evaluate(
    body: EvaluateRequest,
    settings: Settings = Depends(get_settings),
    evaluators: dict[OperatorSet, StateMachineEvaluator] = Depends(get_evaluators),
):
    if _has_lone_surrogate(body.expression):
        raise HTTPException(status_code=422, detail="expression contains an unpaired surrogate")

    operator_set = body.operator_set or settings.operator_set
    result = evaluators[operator_set].evaluate(body.expression)
    if not result.is_success:
        logger.info("Expression %r rejected: %s", body.expression, result.kind)

    return EvaluateResponse(
        expression=body.expression,
        operator_set=operator_set,
        result=result,
        message=describe_result(result),
    )
