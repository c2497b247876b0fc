"""Format validator: built-in data type checks and regex patterns."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from fieldcheck.rule_engine.coercion import is_date_like, is_finite_number, to_text
from fieldcheck.rule_engine.models import FormatConfig, Outcome, Record

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_RE = re.compile(r"^\(?(\d{3})\)?[-.\s]?(\d{3})[-.\s]?(\d{4})$")

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _is_email(text: str) -> bool:
    return EMAIL_RE.match(text) is not None


def _is_phone(text: str) -> bool:
    return PHONE_RE.match(text) is not None


def _is_url(text: str) -> bool:
    if text != text.strip() or " " in text:
        return False
    try:
        _url_adapter.validate_python(text)
    except ValidationError:
        return False
    return True


# data type -> (checker, failure message template)
DATA_TYPE_CHECKS: dict[str, tuple[Callable[[str], bool], str]] = {
    "email": (_is_email, "Value '{}' is not a valid email address"),
    "phone": (_is_phone, "Value '{}' is not a valid phone number"),
    "url": (_is_url, "Value '{}' is not a valid URL"),
    "number": (is_finite_number, "Value '{}' is not a valid number"),
    "date": (is_date_like, "Value '{}' is not a valid date"),
}


def check_data_type(text: str, data_type: str) -> Outcome:
    """Run a built-in type checker. Unknown data types pass."""
    check = DATA_TYPE_CHECKS.get(data_type)
    if check is None:
        return Outcome.ok()
    checker, message = check
    if checker(text):
        return Outcome.ok()
    return Outcome.fail(message.format(text))


def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning(f"Ignoring invalid pattern {pattern!r}: {e}")
        return None


def validate_format(configuration: dict[str, Any], value: Any, record: Record) -> Outcome:
    if value is None:
        return Outcome.ok()

    config = FormatConfig.model_validate(configuration)
    text = to_text(value)

    if config.data_type:
        type_check = check_data_type(text, config.data_type)
        if not type_check.passed:
            return type_check

    if config.pattern:
        regex = compile_pattern(config.pattern)
        if regex is not None and regex.search(text) is None:
            return Outcome.fail(f"Value '{text}' does not match required format pattern")

    return Outcome.ok()
