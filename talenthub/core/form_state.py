"""
Auth form state: field values, errors, mode and request lifecycle.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

EMAIL = "email"
PASSWORD = "password"
CONFIRM_PASSWORD = "confirmPassword"
FULL_NAME = "fullName"
GENERAL = "general"

FIELD_NAMES = (EMAIL, PASSWORD, CONFIRM_PASSWORD, FULL_NAME)


class Mode(str, Enum):
    SIGN_IN = "sign_in"
    SIGN_UP = "sign_up"

    def flipped(self) -> "Mode":
        return Mode.SIGN_UP if self is Mode.SIGN_IN else Mode.SIGN_IN


class RequestState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def empty_fields() -> Dict[str, str]:
    return {name: "" for name in FIELD_NAMES}


@dataclass
class FormState:
    """Everything the auth page renders from."""

    mode: Mode = Mode.SIGN_IN
    fields: Dict[str, str] = field(default_factory=empty_fields)
    errors: Dict[str, str] = field(default_factory=dict)
    request_state: RequestState = RequestState.IDLE
    show_password: bool = False
    show_confirm_password: bool = False

    @property
    def is_submitting(self) -> bool:
        return self.request_state is RequestState.SUBMITTING

    @property
    def is_sign_up(self) -> bool:
        return self.mode is Mode.SIGN_UP

    def value(self, name: str) -> str:
        return self.fields.get(name, "")


def set_field(state: FormState, name: str, value: str) -> None:
    """Store a field value and drop any error currently shown for it."""
    if name not in FIELD_NAMES:
        raise KeyError(f"Unknown form field: {name}")
    state.fields[name] = value if value is not None else ""
    state.errors.pop(name, None)


def toggle_visibility(state: FormState, name: str) -> bool:
    """Flip the show/hide flag of a password input. Returns the new value."""
    if name == PASSWORD:
        state.show_password = not state.show_password
        return state.show_password
    if name == CONFIRM_PASSWORD:
        state.show_confirm_password = not state.show_confirm_password
        return state.show_confirm_password
    raise KeyError(f"Field has no visibility toggle: {name}")


def toggle_mode(current: FormState) -> FormState:
    """Switch between sign in and sign up with nothing carried over."""
    return FormState(mode=current.mode.flipped())
