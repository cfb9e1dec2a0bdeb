"""Form validation run before any collaborator call.

Each validator returns the cleaned value(s) or raises ``ValidationError``
whose message is shown to the user as-is.
"""

from __future__ import annotations

MIN_PASSWORD_LENGTH = 6


class ValidationError(ValueError):
    """User input was rejected before reaching a collaborator."""


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str) -> bool:
    return "@" in email and "." in email


def validate_symptoms(symptoms: str | None) -> str:
    if _is_blank(symptoms):
        raise ValidationError("Please enter your symptoms first.")
    return symptoms


def validate_sign_up(
    name: str, email: str, password: str, confirm_password: str
) -> tuple[str, str, str]:
    """Returns: (name, email, password)"""
    if any(_is_blank(v) for v in (name, email, password, confirm_password)):
        raise ValidationError("Please fill all fields")
    email = email.strip()
    if not is_valid_email(email):
        raise ValidationError("Enter a valid email")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    if password != confirm_password:
        raise ValidationError("Passwords do not match")
    return name.strip(), email, password


def validate_login(email: str, password: str) -> tuple[str, str]:
    if _is_blank(email) or _is_blank(password):
        raise ValidationError("Please enter email and password")
    email = email.strip()
    if not is_valid_email(email):
        raise ValidationError("Enter a valid email")
    return email, password


def validate_name(name: str) -> str:
    if _is_blank(name):
        raise ValidationError("Name cannot be empty")
    return name.strip()


def validate_password_change(
    current_password: str, new_password: str, confirm_password: str
) -> tuple[str, str]:
    if any(_is_blank(v) for v in (current_password, new_password, confirm_password)):
        raise ValidationError("Please fill all fields")
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"New password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    if new_password != confirm_password:
        raise ValidationError("Passwords do not match")
    return current_password, new_password
