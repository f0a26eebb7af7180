"""
TalentHub Frontend - Main Application Entry Point
"""
import streamlit as st

from talenthub.config.settings import settings
from talenthub.core.logging import get_logger
from talenthub.core.navigation import Navigator, resolve_route
from talenthub.core.session import init_session_state, is_authenticated
from talenthub.views.auth_page import render_auth_page, unmount_controller
from talenthub.views.profile_page import render_profile_page

logger = get_logger(__name__)


def main():
    """Main application entry point"""
    st.set_page_config(
        page_title=settings.PAGE_TITLE,
        page_icon=settings.PAGE_ICON,
        layout=settings.LAYOUT,
    )

    init_session_state()
    navigator = Navigator()
    route = resolve_route(navigator)
    logger.debug(f"Rendering route {route} | authenticated: {is_authenticated()}")

    if route == settings.AUTH_PATH:
        render_auth_page(navigator)
        return

    unmount_controller()
    if route == settings.DEFAULT_REDIRECT_PATH:
        render_profile_page()
    else:
        logger.warning(f"Unknown route requested: {route}")
        st.error("Page not found.")
        if st.button("Go to sign in"):
            navigator.navigate(settings.AUTH_PATH)
            st.rerun()


if __name__ == "__main__":
    main()
