"""API endpoints for describing and validating cron expressions."""

from fastapi import APIRouter, HTTPException, Query
from typing import Optional
from pydantic import BaseModel, Field
import logging

from config import settings
from descriptor import CronExpressionError, describe, parse
from models import DescriptionScope, Options

logger = logging.getLogger(__name__)

router = APIRouter()


# Pydantic models for request/response
class OptionsOverride(BaseModel):
    throw_on_parse_error: Optional[bool] = None
    verbose: Optional[bool] = None
    use_24_hour_format: Optional[bool] = None
    use_alternate_dow_dialect: Optional[bool] = None


class DescribeRequest(BaseModel):
    expression: str = Field(..., min_length=1, max_length=255)
    scope: DescriptionScope = DescriptionScope.FULL
    options: Optional[OptionsOverride] = None


class ValidateRequest(BaseModel):
    expression: str = Field(..., min_length=1, max_length=255)
    use_alternate_dow_dialect: Optional[bool] = None


def resolve_options(overrides: Optional[OptionsOverride] = None) -> Options:
    """Apply request overrides on top of the configured defaults."""
    options = settings.default_options()
    if overrides is None:
        return options

    update = {key: value for key, value in overrides.model_dump().items() if value is not None}
    return options.model_copy(update=update)


def describe_or_400(expression: str, scope: DescriptionScope, options: Options):
    try:
        description = describe(expression, options, scope)
    except CronExpressionError as e:
        logger.info(f"Rejected cron expression '{expression}': {e}")
        raise HTTPException(status_code=400, detail=e.to_dict())

    return {
        "expression": expression,
        "scope": scope.value,
        "description": description
    }


@router.get("/describe")
async def describe_expression(
    expression: str = Query(..., min_length=1, max_length=255),
    scope: DescriptionScope = DescriptionScope.FULL,
    verbose: Optional[bool] = None,
    use_24_hour_format: Optional[bool] = None,
    use_alternate_dow_dialect: Optional[bool] = None
):
    """Describe a cron expression passed as a query parameter."""
    overrides = OptionsOverride(
        verbose=verbose,
        use_24_hour_format=use_24_hour_format,
        use_alternate_dow_dialect=use_alternate_dow_dialect
    )
    return describe_or_400(expression, scope, resolve_options(overrides))


@router.post("/describe")
async def describe_expression_body(request: DescribeRequest):
    """Describe a cron expression passed in the request body."""
    return describe_or_400(request.expression, request.scope, resolve_options(request.options))


@router.post("/validate")
async def validate_expression(request: ValidateRequest):
    """Check whether a cron expression is valid."""
    options = resolve_options(OptionsOverride(use_alternate_dow_dialect=request.use_alternate_dow_dialect))

    try:
        canonical = parse(request.expression, options)
    except CronExpressionError as e:
        return {"valid": False, **e.to_dict()}

    return {"valid": True, "fields": canonical.to_dict()}
