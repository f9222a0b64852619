"""Per-process counters for the remote enhancement path."""

import logging
import threading

from rtctf.models.enums import FallbackReason

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_attempts = 0
_successes = 0
_fallbacks: dict[FallbackReason, int] = {reason: 0 for reason in FallbackReason}
_total_prompt_tokens = 0
_total_completion_tokens = 0


def record_attempt() -> None:
    global _attempts
    with _lock:
        _attempts += 1


def record_success() -> None:
    global _successes
    with _lock:
        _successes += 1
    logger.info(
        "Enhancement metrics - attempts=%d, successes=%d, successRate=%.1f%%",
        _attempts, _successes, get_success_rate(),
    )


def record_fallback(reason: FallbackReason) -> None:
    with _lock:
        _fallbacks[reason] += 1
        count = _fallbacks[reason]
    logger.warning(
        "Enhancement metrics - fallback reason=%s (count=%d), attempts=%d, successRate=%.1f%%",
        reason.value, count, _attempts, get_success_rate(),
    )


def record_usage(prompt_tokens: int, completion_tokens: int) -> None:
    global _total_prompt_tokens, _total_completion_tokens
    with _lock:
        _total_prompt_tokens += prompt_tokens
        _total_completion_tokens += completion_tokens


def get_success_rate() -> float:
    with _lock:
        return (_successes / _attempts * 100) if _attempts > 0 else 0


def snapshot() -> dict:
    with _lock:
        return {
            "attempts": _attempts,
            "successes": _successes,
            "fallbacks": {reason.value: count for reason, count in _fallbacks.items()},
            "promptTokens": _total_prompt_tokens,
            "completionTokens": _total_completion_tokens,
        }


def reset() -> None:
    global _attempts, _successes, _total_prompt_tokens, _total_completion_tokens
    with _lock:
        _attempts = 0
        _successes = 0
        _total_prompt_tokens = 0
        _total_completion_tokens = 0
        for reason in FallbackReason:
            _fallbacks[reason] = 0
