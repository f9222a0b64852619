import json
from typing import TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from rtctf.core.config import Settings, settings
from rtctf.core.exceptions import (
    InvalidContentTypeException,
    OriginNotAllowedException,
    RateLimitExceededException,
)
from rtctf.i18n.messages import resolve_language
from rtctf.services import rate_limiter as rate_limiter_module
from rtctf.services.rate_limiter import RateLimiter

UNKNOWN_CLIENT = "unknown"

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_settings() -> Settings:
    return settings


def get_rate_limiter() -> RateLimiter:
    return rate_limiter_module.rate_limiter


def derive_client_key(request: Request) -> str:
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first

    real_ip = request.headers.get("x-real-ip")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    return UNKNOWN_CLIENT


async def validate_request(
    request: Request,
    app_settings: Settings = Depends(get_settings),
) -> None:
    language = resolve_language(request.headers.get("accept-language"))

    content_type = request.headers.get("content-type")
    if content_type is not None and "application/json" not in content_type.lower():
        raise InvalidContentTypeException(language)

    if app_settings.is_production:
        origin = request.headers.get("origin")
        if origin is not None and origin not in app_settings.allowed_origins:
            raise OriginNotAllowedException(language)


async def enforce_rate_limit(
    request: Request,
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> str:
    client_key = derive_client_key(request)
    decision = limiter.try_acquire(client_key)
    if not decision.allowed:
        raise RateLimitExceededException(
            decision.retry_after_seconds,
            resolve_language(request.headers.get("accept-language")),
        )
    return client_key


async def parse_body(request: Request, model: type[ModelT]) -> ModelT:
    """Decode and validate the JSON body once the gate has passed.

    Runs inside the handler so a missing Content-Type is still read as JSON and
    malformed bodies are counted by the rate limiter like any other request.
    """
    raw = await request.body()
    try:
        data = json.loads(raw) if raw else None
    except ValueError as e:
        raise RequestValidationError([{
            "type": "json_invalid",
            "loc": ("body",),
            "msg": "JSON decode error",
            "input": {},
            "ctx": {"error": str(e)},
        }]) from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [{**error, "loc": ("body", *error["loc"])} for error in e.errors(include_url=False)]
        raise RequestValidationError(errors, body=data) from e
