"""
Local validation of auth form fields.
"""
import re
from typing import Dict, Mapping

from talenthub.core.errors import LocalValidationError
from talenthub.core.form_state import (
    CONFIRM_PASSWORD,
    EMAIL,
    FULL_NAME,
    PASSWORD,
    Mode,
)
from talenthub.core.password import score_password

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_PASSWORD_SCORE = 4
MIN_NAME_LENGTH = 2


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value or "") is not None


def validate(fields: Mapping[str, str], mode: Mode) -> Dict[str, str]:
    """
    Collect every field error for the given mode.

    Values are checked as typed (no trimming). Name and confirmation are
    only looked at when signing up.

    Args:
        fields: Field name to value
        mode: Active form mode

    Returns:
        Field name to error message; empty when the form can be submitted
    """
    errors: Dict[str, str] = {}
    email = fields.get(EMAIL) or ""
    password = fields.get(PASSWORD) or ""

    if not email:
        errors[EMAIL] = "Email required"
    elif not is_valid_email(email):
        errors[EMAIL] = "Invalid email"

    if not password:
        errors[PASSWORD] = "Password required"

    if mode is Mode.SIGN_UP:
        full_name = fields.get(FULL_NAME) or ""
        confirm = fields.get(CONFIRM_PASSWORD) or ""

        if not full_name:
            errors[FULL_NAME] = "Name required"
        elif len(full_name) < MIN_NAME_LENGTH:
            errors[FULL_NAME] = "Name too short"

        if not confirm:
            errors[CONFIRM_PASSWORD] = "Confirm password"
        elif confirm != password:
            errors[CONFIRM_PASSWORD] = "Passwords don't match"

        if password and score_password(password) < MIN_PASSWORD_SCORE:
            errors[PASSWORD] = "Password too weak"

    return errors


def ensure_valid(fields: Mapping[str, str], mode: Mode) -> None:
    """Raise LocalValidationError if validate() finds anything."""
    errors = validate(fields, mode)
    if errors:
        raise LocalValidationError(errors)
