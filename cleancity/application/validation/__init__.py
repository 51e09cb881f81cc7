"""Validation rules for posts and report forms."""

from .post_rules import (
    MinLengthRule,
    NoSpamRule,
    PostValidator,
    RequiredFieldsRule,
    ValidationRule,
    create_basic_validator,
    create_strict_validator,
)
from .report_form import validate_report_form

__all__ = [
    "MinLengthRule",
    "NoSpamRule",
    "PostValidator",
    "RequiredFieldsRule",
    "ValidationRule",
    "create_basic_validator",
    "create_strict_validator",
    "validate_report_form",
]
