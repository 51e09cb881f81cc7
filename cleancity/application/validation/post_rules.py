"""Composable validation rules for community post drafts."""

from __future__ import annotations

from typing import Protocol

from cleancity.domain.entities import PostDraft, ValidationResult

SPAM_KEYWORDS: tuple[str, ...] = ("spam", "click here", "free money", "buy now")


class ValidationRule(Protocol):
    rule_name: str

    def validate(self, data: PostDraft) -> ValidationResult: ...


class RequiredFieldsRule:
    rule_name = "RequiredFields"

    def validate(self, data: PostDraft) -> ValidationResult:
        errors: list[str] = []
        if not (data.title or "").strip():
            errors.append("Title is required")
        if not (data.content or "").strip():
            errors.append("Content is required")
        return ValidationResult.from_errors(errors)


class MinLengthRule:
    """Check minimum lengths; empty fields are left to :class:`RequiredFieldsRule`."""

    rule_name = "MinLength"

    def __init__(self, min_title_length: int = 3, min_content_length: int = 10) -> None:
        self.min_title_length = min_title_length
        self.min_content_length = min_content_length

    def validate(self, data: PostDraft) -> ValidationResult:
        errors: list[str] = []
        if data.title and len(data.title) < self.min_title_length:
            errors.append(f"Title must be at least {self.min_title_length} characters")
        if data.content and len(data.content) < self.min_content_length:
            errors.append(
                f"Content must be at least {self.min_content_length} characters"
            )
        return ValidationResult.from_errors(errors)


class NoSpamRule:
    rule_name = "NoSpam"

    def __init__(self, keywords: tuple[str, ...] = SPAM_KEYWORDS) -> None:
        self.keywords = keywords

    def validate(self, data: PostDraft) -> ValidationResult:
        title = (data.title or "").lower()
        content = (data.content or "").lower()
        errors = [
            f'Content contains prohibited keyword: "{keyword}"'
            for keyword in self.keywords
            if keyword in content or keyword in title
        ]
        return ValidationResult.from_errors(errors)


class PostValidator:
    """Run an ordered list of rules and collect every error they report."""

    def __init__(self) -> None:
        self.rules: list[ValidationRule] = []

    def add_rule(self, rule: ValidationRule) -> "PostValidator":
        self.rules.append(rule)
        return self

    def validate(self, data: PostDraft) -> ValidationResult:
        errors: list[str] = []
        for rule in self.rules:
            result = rule.validate(data)
            if not result.is_valid:
                errors.extend(result.errors)
        return ValidationResult.from_errors(errors)


def create_basic_validator() -> PostValidator:
    return PostValidator().add_rule(RequiredFieldsRule()).add_rule(MinLengthRule(3, 10))


def create_strict_validator() -> PostValidator:
    return (
        PostValidator()
        .add_rule(RequiredFieldsRule())
        .add_rule(MinLengthRule(5, 50))
        .add_rule(NoSpamRule())
    )


__all__ = [
    "MinLengthRule",
    "NoSpamRule",
    "PostValidator",
    "RequiredFieldsRule",
    "SPAM_KEYWORDS",
    "ValidationRule",
    "create_basic_validator",
    "create_strict_validator",
]
