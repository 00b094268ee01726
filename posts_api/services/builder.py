"""Assembly of new post records from validated create requests."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from posts_api.core.errors import ValidationError
from posts_api.models.post import CLIENT_TEXT_FIELDS, Post
from posts_api.services.sequence import PostIdSequence


def build_post(body: Mapping[str, Any], sequence: PostIdSequence) -> Post:
    """Build a complete ``Post`` from a create request.

    Assumes ``validate_post_request`` already accepted *body*.  Generates the
    ``id``, takes ``postId`` from *sequence*, stamps ``createdAt`` in UTC
    ISO-8601 and copies the client fields as given.  Missing client fields
    are stored as ``None``.

    Raises ``ValidationError`` if a client field is not a string; no
    sequence number is drawn in that case.
    """
    fields: dict[str, Any] = {name: body.get(name) for name in CLIENT_TEXT_FIELDS}

    invalid = [
        name for name, value in fields.items()
        if value is not None and not isinstance(value, str)
    ]
    if invalid:
        raise ValidationError(f"{', '.join(invalid)} must be a string")

    return Post.model_validate(
        {
            "id": str(uuid4()),
            "postId": sequence.next_value(),
            "createdAt": datetime.now(timezone.utc).isoformat(),
            **fields,
            # whole-number floats such as 1.0 are stored as ints
            "appCategory": int(body["appCategory"]),
            "newsCategory": int(body["newsCategory"]),
            "region": int(body["region"]),
        }
    )
