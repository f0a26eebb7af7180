"""
Session state management utilities.
"""
from typing import MutableMapping, Optional

import streamlit as st

ROUTE_KEY = "route"
REDIRECT_FROM_KEY = "redirect_from"
EMAIL_KEY = "email"
AUTH_FORM_KEY = "auth_form"
AUTH_SERVICE_KEY = "auth_service"


def _session(state: Optional[MutableMapping] = None) -> MutableMapping:
    return st.session_state if state is None else state


def init_session_state(state: Optional[MutableMapping] = None):
    """Initialize session state variables"""
    session = _session(state)
    if ROUTE_KEY not in session:
        session[ROUTE_KEY] = "/"
    if REDIRECT_FROM_KEY not in session:
        session[REDIRECT_FROM_KEY] = None
    if EMAIL_KEY not in session:
        session[EMAIL_KEY] = None


def clear_session_state(state: Optional[MutableMapping] = None):
    """Clear all session state"""
    session = _session(state)
    for key in list(session.keys()):
        del session[key]


def is_authenticated(state: Optional[MutableMapping] = None) -> bool:
    """Check if user is authenticated"""
    return _session(state).get(EMAIL_KEY) is not None


def get_current_user(state: Optional[MutableMapping] = None):
    """Get current user information"""
    return {"email": _session(state).get(EMAIL_KEY)}


def get_auth_service(state: Optional[MutableMapping] = None):
    """AuthService holding the signed-in session cookies, if any"""
    return _session(state).get(AUTH_SERVICE_KEY)
