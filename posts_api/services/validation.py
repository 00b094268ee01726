"""Request validation for the posts endpoints.

``validate_post_request`` checks the enumerated fields of a create request
in a fixed order and stops at the first failure.  The ``parse_*`` helpers
turn raw request parts (JSON text, path segments) into checked values and
raise ``ValidationError`` instead of letting decoding faults escape.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import pydantic

from posts_api.core.config import settings
from posts_api.core.constants import (
    APP_CATEGORY_ERROR,
    BODY_ERROR,
    LIMIT_ERROR,
    NEWS_CATEGORY_ERROR,
    REGION_ERROR,
)
from posts_api.core.errors import ValidationError
from posts_api.models.enums import AppCategory, NewsCategory, Region
from posts_api.models.post import PostUpdate

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a category
    return isinstance(value, int) and not isinstance(value, bool)


def _as_whole_number(value: Any) -> int | None:
    # JSON has a single number type, so 1.0 is the same value as 1
    if _is_int(value):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _is_member(value: Any, enum_type: type) -> bool:
    number = _as_whole_number(value)
    return number is not None and number in {member.value for member in enum_type}


# ---------------------------------------------------------------------------
# Body parsing
# ---------------------------------------------------------------------------

def parse_body(raw: str | bytes | Mapping[str, Any] | None) -> dict[str, Any]:
    """Decode a request body into a JSON object.

    Already-decoded mappings are returned as a plain dict.  Empty bodies,
    text that is not JSON, and JSON values that are not objects all raise
    ``ValidationError``.
    """
    if isinstance(raw, Mapping):
        return dict(raw)
    if raw is None or not raw.strip():
        raise ValidationError(BODY_ERROR)
    try:
        decoded = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.info("request_body_malformed", extra={"error_message": str(exc)})
        raise ValidationError(BODY_ERROR) from exc
    if not isinstance(decoded, dict):
        raise ValidationError(BODY_ERROR)
    return decoded


# ---------------------------------------------------------------------------
# Create validation
# ---------------------------------------------------------------------------

def validate_post_request(body: Mapping[str, Any]) -> None:
    """Check appCategory, newsCategory and region, in that order.

    Raises ``ValidationError`` carrying the message for the first field that
    fails; returns ``None`` when all three are valid.
    """
    if not _is_member(body.get("appCategory"), AppCategory):
        raise ValidationError(APP_CATEGORY_ERROR)

    if not _is_member(body.get("newsCategory"), NewsCategory):
        raise ValidationError(NEWS_CATEGORY_ERROR)

    if not _is_member(body.get("region"), Region):
        raise ValidationError(REGION_ERROR)


# ---------------------------------------------------------------------------
# Update / list-N parsing
# ---------------------------------------------------------------------------

def parse_update(body: Mapping[str, Any]) -> PostUpdate:
    """Return the title/body pair of an update request.

    Other keys are ignored.  Non-string values raise ``ValidationError``.
    """
    try:
        return PostUpdate.model_validate(body)
    except pydantic.ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors())
        raise ValidationError(f"{fields} must be a string") from exc


def parse_limit(raw: str | int | None) -> int:
    """Turn the list-N path segment into a store item limit.

    The value must be an ASCII base-10 integer of at least 1; anything else
    raises ``ValidationError``.  Values above ``settings.MAX_LIST_LIMIT`` are
    clamped to it, however many digits they have.
    """
    max_limit = settings.MAX_LIST_LIMIT
    if _is_int(raw):
        number = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        digits = raw.strip().lstrip("0")
        if len(digits) > len(str(max_limit)):
            return max_limit
        number = int(digits or "0")
    else:
        raise ValidationError(LIMIT_ERROR)

    if number < 1:
        raise ValidationError(LIMIT_ERROR)
    return min(number, max_limit)
