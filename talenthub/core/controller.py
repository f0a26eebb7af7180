"""
Submission controller for the auth form.

Owns the FormState of one mounted auth page and drives it through
validation, the Auth Service request and the result. Only one request
may be in flight; its result is dropped if the mode was switched or the
page went away before it arrived.
"""
from enum import Enum
from typing import MutableMapping, Optional

from talenthub.api.auth import AuthService
from talenthub.api.client import handle_http_error
from talenthub.config.settings import settings
from talenthub.core.auth import set_auth_state
from talenthub.core.errors import AuthFormError, LocalValidationError
from talenthub.core.form_state import (
    EMAIL,
    FULL_NAME,
    GENERAL,
    PASSWORD,
    FormState,
    Mode,
    RequestState,
    set_field,
    toggle_mode,
    toggle_visibility,
)
from talenthub.core.logging import get_logger
from talenthub.core.navigation import Navigator
from talenthub.core.validation import ensure_valid

logger = get_logger(__name__)


class SubmitOutcome(str, Enum):
    IGNORED = "ignored"
    INVALID = "invalid"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    STALE = "stale"


class CancellationToken:
    """Marks one submission whose result should no longer be applied."""

    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class SubmissionController:
    def __init__(
        self,
        auth_service: AuthService,
        navigator: Navigator,
        redirect_from: Optional[str] = None,
        session: Optional[MutableMapping] = None,
        state: Optional[FormState] = None,
    ):
        self.auth_service = auth_service
        self.navigator = navigator
        self.redirect_from = redirect_from
        self.state = state if state is not None else FormState()
        self._session = session
        self._token: Optional[CancellationToken] = None
        self._mounted = True

    @property
    def can_submit(self) -> bool:
        return self._mounted and not self.state.is_submitting

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def destination(self) -> str:
        return self.redirect_from or settings.DEFAULT_REDIRECT_PATH

    def update_field(self, name: str, value: str) -> None:
        set_field(self.state, name, value)

    def toggle_password_visibility(self, name: str) -> bool:
        return toggle_visibility(self.state, name)

    def toggle_mode(self) -> FormState:
        """Flip sign in / sign up. Any request still in flight is abandoned."""
        self._cancel_in_flight()
        self.state = toggle_mode(self.state)
        logger.debug(f"Auth form mode switched to {self.state.mode.value}")
        return self.state

    def unmount(self) -> None:
        self._cancel_in_flight()
        self._mounted = False

    def _cancel_in_flight(self) -> None:
        if self._token is not None:
            logger.info("Abandoning in-flight auth request")
            self._token.cancel()
            self._token = None

    async def submit(self) -> SubmitOutcome:
        """
        Validate the form and, if it is clean, send it to the Auth Service.

        Returns:
            What happened to this submit attempt
        """
        if not self.can_submit:
            logger.debug("Submit ignored while a request is in flight")
            return SubmitOutcome.IGNORED

        state = self.state
        try:
            ensure_valid(state.fields, state.mode)
        except LocalValidationError as e:
            state.errors = e.errors
            state.request_state = RequestState.IDLE
            logger.info(f"Auth form has {len(e.errors)} invalid field(s): {', '.join(sorted(e.errors))}")
            return SubmitOutcome.INVALID

        state.errors = {}
        state.request_state = RequestState.SUBMITTING
        token = CancellationToken()
        self._token = token

        email = state.value(EMAIL)
        operation = "Login" if state.mode is Mode.SIGN_IN else "Registration"
        try:
            if state.mode is Mode.SIGN_IN:
                await self.auth_service.login(email, state.value(PASSWORD))
            else:
                await self.auth_service.register(email, state.value(PASSWORD), state.value(FULL_NAME))
        except Exception as e:
            error = e if isinstance(e, AuthFormError) else handle_http_error(e, operation, logger)
            if token.cancelled:
                logger.info(f"{operation} failed after the form moved on; result dropped")
                return SubmitOutcome.STALE
            self._token = None
            state.errors = {GENERAL: error.message}
            state.request_state = RequestState.FAILED
            return SubmitOutcome.FAILED

        if token.cancelled:
            logger.info(f"{operation} finished after the form moved on; result dropped")
            return SubmitOutcome.STALE
        self._token = None
        state.request_state = RequestState.SUCCEEDED
        set_auth_state(email, self._session, auth_service=self.auth_service)
        self.navigator.navigate(self.destination)
        return SubmitOutcome.SUCCEEDED
