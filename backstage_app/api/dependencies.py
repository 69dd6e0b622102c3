"""Request Dependencies — settings, injectable capabilities, and body decoding.

Invariants:
    - Handlers never touch process globals directly: runtime metrics and the
      service metrics generator arrive through Depends() and can be overridden
      via app.dependency_overrides
    - Body decoding accepts JSON and URL-encoded forms; an empty body or any
      other media type decodes to an empty record
    - An undecodable body raises InvalidRequestBodyError (400) before the handler runs
"""

import logging

from fastapi import Request
from pydantic import ValidationError

from backstage_app.api.error_handlers import format_validation_details
from backstage_app.config import Settings
from backstage_app.core.capabilities import (
    RuntimeMetricsProvider, ServiceMetricsGenerator,
)
from backstage_app.core.errors import InvalidRequestBodyError
from backstage_app.infrastructure.runtime_metrics import ProcessRuntimeMetrics
from backstage_app.infrastructure.service_metrics import RandomServiceMetrics
from backstage_app.schemas.service import ServiceCreate

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"

_runtime_metrics = ProcessRuntimeMetrics()
_service_metrics = RandomServiceMetrics()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_runtime_metrics() -> RuntimeMetricsProvider:
    return _runtime_metrics


def get_service_metrics() -> ServiceMetricsGenerator:
    return _service_metrics


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";")[0].strip().lower()


async def decode_body(request: Request) -> dict:
    """Decode the request body into a plain dict."""
    body = await request.body()
    if not body:
        return {}

    media_type = _media_type(request)
    if media_type == FORM_MEDIA_TYPE:
        form = await request.form()
        return dict(form)
    if media_type == JSON_MEDIA_TYPE or media_type.endswith("+json"):
        try:
            data = await request.json()
        except ValueError as exc:
            raise InvalidRequestBodyError([
                {"field": "body", "message": str(exc), "type": "json_invalid"},
            ]) from exc
        if not isinstance(data, dict):
            raise InvalidRequestBodyError([
                {"field": "body", "message": "Expected a JSON object", "type": "dict_type"},
            ])
        return data

    logger.debug(f"Ignoring body with unsupported media type {media_type!r}")
    return {}


async def decode_service_create(request: Request) -> ServiceCreate:
    """Dependency: POST /api/services body as a ServiceCreate record."""
    data = await decode_body(request)
    try:
        return ServiceCreate.model_validate(data)
    except ValidationError as exc:
        raise InvalidRequestBodyError(
            format_validation_details(exc.errors()),
        ) from exc
