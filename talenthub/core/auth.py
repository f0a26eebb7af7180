"""
Authentication state helpers.
"""
from typing import MutableMapping, Optional

from talenthub.core.logging import get_logger, mask_email
from talenthub.core.session import AUTH_SERVICE_KEY, EMAIL_KEY, _session, clear_session_state

logger = get_logger(__name__)


def set_auth_state(email: str, state: Optional[MutableMapping] = None, auth_service=None):
    """Remember who signed in and the AuthService carrying their session cookie"""
    session = _session(state)
    session[EMAIL_KEY] = email
    if auth_service is not None:
        session[AUTH_SERVICE_KEY] = auth_service
    logger.info(f"Authentication state set | email: {mask_email(email)}")


def clear_auth_state(state: Optional[MutableMapping] = None):
    """Clear authentication state"""
    email = _session(state).get(EMAIL_KEY)
    logger.info(f"Clearing authentication state | user: {mask_email(email) if email else 'unknown'}")
    clear_session_state(state)
