import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from rtctf.core.security import apply_security_headers
from rtctf.i18n.messages import MessageKey, get_message, resolve_language
from rtctf.models.enums import Language

logger = logging.getLogger(__name__)


# --- Custom Exceptions ---


class RequestRejectedException(Exception):
    """Base for gate rejections surfaced as HTTP 400."""

    message_key = MessageKey.INVALID_REQUEST

    def __init__(self, language: Language = Language.EN):
        self.language = language
        super().__init__(get_message(self.message_key, language))


class InvalidContentTypeException(RequestRejectedException):
    message_key = MessageKey.INVALID_CONTENT_TYPE


class OriginNotAllowedException(RequestRejectedException):
    message_key = MessageKey.ORIGIN_NOT_ALLOWED


class RateLimitExceededException(Exception):
    def __init__(self, retry_after_seconds: int, language: Language = Language.EN):
        self.retry_after_seconds = retry_after_seconds
        self.language = language
        super().__init__(get_message(MessageKey.RATE_LIMITED, language))


class AiTransformError(Exception):
    pass


# --- Exception Handlers ---


def _error_response(
    status_code: int,
    code: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    response = JSONResponse(
        status_code=status_code,
        content={"error": message, "code": code},
        headers=headers,
    )
    apply_security_headers(response)
    return response


def _language_from_request(request: Request, body: object = None) -> Language:
    if isinstance(body, dict) and "language" in body:
        return resolve_language(body.get("language"))
    return resolve_language(request.headers.get("accept-language"))


def _classify_validation_errors(errors: list[dict]) -> MessageKey:
    for error in errors:
        loc = error.get("loc", ())
        if "text" not in loc:
            continue
        if error.get("type") == "string_too_long":
            return MessageKey.TEXT_TOO_LONG
        return MessageKey.TEXT_REQUIRED
    return MessageKey.INVALID_REQUEST


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestRejectedException)
    async def handle_rejected(request: Request, exc: RequestRejectedException):
        logger.info("[RequestGate] Rejected %s: %s", request.url.path, exc.message_key.value)
        return _error_response(400, exc.message_key.value, str(exc))

    @app.exception_handler(RateLimitExceededException)
    async def handle_rate_limited(request: Request, exc: RateLimitExceededException):
        return _error_response(
            429,
            MessageKey.RATE_LIMITED.value,
            str(exc),
            headers={"Retry-After": str(exc.retry_after_seconds)},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = list(exc.errors())
        language = _language_from_request(request, exc.body)

        if any(e.get("type") == "json_invalid" for e in errors):
            logger.error("[GlobalExceptionHandler] Malformed JSON body on %s: %s", request.url.path, errors)
            return _error_response(500, MessageKey.INTERNAL_ERROR.value, get_message(MessageKey.INTERNAL_ERROR, language))

        key = _classify_validation_errors(errors)
        logger.info("[RequestGate] Validation failed on %s: %s", request.url.path, key.value)
        return _error_response(400, key.value, get_message(key, language))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error("[GlobalExceptionHandler] Unhandled exception", exc_info=exc)
        language = _language_from_request(request)
        return _error_response(500, MessageKey.INTERNAL_ERROR.value, get_message(MessageKey.INTERNAL_ERROR, language))
