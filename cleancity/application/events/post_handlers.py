"""Ready-made handlers for community feed events."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any, Callable

from cleancity.domain.entities import PostCreated, PostEvent

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def create_logging_handler(event_type: PostEvent | str) -> Callable[[Any], None]:
    """Return a handler that logs every payload of ``event_type`` as JSON."""

    label = getattr(event_type, "value", event_type)

    def handler(payload: Any) -> None:
        data = asdict(payload) if is_dataclass(payload) else payload
        logger.info(
            "Post event %s: %s",
            label,
            json.dumps(data, default=_json_default, ensure_ascii=False),
        )

    return handler


def create_post_created_handler() -> Callable[[PostCreated], None]:
    """Return a handler announcing newly created posts."""

    def handler(payload: PostCreated) -> None:
        logger.info("New post %s created by user %s", payload.post.id, payload.author_id)

    return handler


__all__ = ["create_logging_handler", "create_post_created_handler"]
