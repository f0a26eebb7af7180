"""
Profile page shown after a successful sign in.
"""
import asyncio
from typing import Dict, Optional

import streamlit as st

from talenthub.components.sidebar import render_sidebar
from talenthub.core.errors import AuthFormError
from talenthub.core.logging import get_logger, mask_email
from talenthub.core.session import get_auth_service, get_current_user

logger = get_logger(__name__)


def load_profile() -> Optional[Dict]:
    """Fetch the profile with the session cookie from sign in"""
    service = get_auth_service()
    if service is None:
        st.warning("Your session has expired. Please sign in again.")
        return None
    try:
        with st.spinner("Loading profile..."):
            return asyncio.run(service.get_profile())
    except AuthFormError as e:
        st.error(f"Error loading profile: {e.message}")
        st.button("Try again")
    return None


def render_profile_page():
    """Render the signed-in user's profile"""
    user = get_current_user()
    logger.debug(f"Rendering profile page for user: {mask_email(user['email'])}")

    render_sidebar()
    st.title("Profile")

    profile = load_profile()
    if profile is None:
        return
    if not profile:
        st.info("Unable to load user profile information.")
        return

    st.subheader(profile.get("fullName") or "User Name")
    st.write(profile.get("email") or user["email"])
    st.write(profile.get("bio") or "This user hasn't added a bio yet.")

    skills = profile.get("skills") or []
    if skills:
        st.write("**Skills:** " + ", ".join(str(s) for s in skills))
    for key, label in (("phone", "Phone"), ("location", "Location")):
        if profile.get(key):
            st.write(f"**{label}:** {profile[key]}")
