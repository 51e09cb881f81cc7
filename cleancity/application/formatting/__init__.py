"""Display formatters for community posts."""

from .post_formatters import (
    BasePostFormatter,
    CompactPostFormatter,
    FormattedPost,
    RelativeTimePostFormatter,
    StandardPostFormatter,
    create_formatter,
)

__all__ = [
    "BasePostFormatter",
    "CompactPostFormatter",
    "FormattedPost",
    "RelativeTimePostFormatter",
    "StandardPostFormatter",
    "create_formatter",
]
