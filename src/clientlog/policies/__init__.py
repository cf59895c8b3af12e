"""Policies – redaction, sampling and rate limiting applied before enqueue."""
from clientlog.policies.rate_limiter import WINDOW_MS, FixedWindowRateLimiter, make_rate_limiter
from clientlog.policies.redactor import (
    DEFAULT_SENSITIVE_KEYS,
    REDACTED,
    KeyRedactor,
    Redactor,
    make_redactor,
)
from clientlog.policies.sampler import ALWAYS_KEPT, RandomSource, Sampler, should_sample

__all__ = [
    "ALWAYS_KEPT",
    "DEFAULT_SENSITIVE_KEYS",
    "FixedWindowRateLimiter",
    "KeyRedactor",
    "REDACTED",
    "RandomSource",
    "Redactor",
    "Sampler",
    "WINDOW_MS",
    "make_rate_limiter",
    "make_redactor",
    "should_sample",
]
