"""
Sidebar component.
"""
import asyncio

import streamlit as st

from talenthub.config.settings import settings
from talenthub.core.auth import clear_auth_state
from talenthub.core.session import ROUTE_KEY, get_auth_service, get_current_user


def render_sidebar():
    """Render the sidebar with user info and sign out"""
    st.sidebar.title("TalentHub")

    user_email = get_current_user()["email"]
    st.sidebar.write(f"Signed in as {user_email}")

    if st.sidebar.button("Sign out"):
        service = get_auth_service()
        if service is not None:
            asyncio.run(service.aclose())
        clear_auth_state()
        st.session_state[ROUTE_KEY] = settings.AUTH_PATH
        st.rerun()
