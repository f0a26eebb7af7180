"""
Authentication page (Sign in / Sign up).
"""
import asyncio

import streamlit as st

from talenthub.api.auth import AuthService
from talenthub.config.settings import settings
from talenthub.core.controller import SubmissionController, SubmitOutcome
from talenthub.core.form_state import (
    CONFIRM_PASSWORD,
    EMAIL,
    FULL_NAME,
    GENERAL,
    PASSWORD,
)
from talenthub.core.logging import get_logger
from talenthub.core.navigation import Navigator
from talenthub.core.password import strength_meter
from talenthub.core.session import AUTH_FORM_KEY

logger = get_logger(__name__)

_WIDGET_PREFIX = "auth_input_"
_METER_COLORS = {"excellent": "green", "strong": "blue", "fair": "orange", "weak": "red"}


def get_controller(navigator: Navigator) -> SubmissionController:
    """Return the controller of the mounted auth page, creating it on first render"""
    controller = st.session_state.get(AUTH_FORM_KEY)
    if controller is None or not controller.mounted:
        logger.debug("Mounting auth form")
        controller = SubmissionController(
            AuthService(settings.API_BASE_URL, settings.AUTH_REQUEST_TIMEOUT),
            navigator,
            redirect_from=navigator.redirect_from,
        )
        st.session_state[AUTH_FORM_KEY] = controller
    return controller


def unmount_controller():
    """Drop the auth form when the user leaves the page"""
    controller = st.session_state.pop(AUTH_FORM_KEY, None)
    if controller is not None:
        logger.debug("Unmounting auth form")
        controller.unmount()
    _clear_widgets()


def _clear_widgets():
    for key in [k for k in st.session_state.keys() if str(k).startswith(_WIDGET_PREFIX)]:
        del st.session_state[key]


def _on_switch_mode(controller: SubmissionController):
    controller.toggle_mode()
    _clear_widgets()


def _field_input(controller: SubmissionController, name: str, label: str, secret: bool = False, visible: bool = False):
    key = _WIDGET_PREFIX + name
    st.text_input(
        label,
        value=controller.state.value(name),
        type="default" if (visible or not secret) else "password",
        key=key,
        on_change=lambda: controller.update_field(name, st.session_state[key]),
    )
    error = controller.state.errors.get(name)
    if error:
        st.caption(f":red[{error}]")


def _password_meter(controller: SubmissionController):
    password = controller.state.value(PASSWORD)
    if not controller.state.is_sign_up or not password:
        return
    meter = strength_meter(password)
    st.progress(int(meter.percent))
    st.caption(f":{_METER_COLORS[meter.level]}[{meter.label}]")


def render_auth_page(navigator: Navigator):
    """Render sign in / sign up form"""
    logger.debug("Rendering authentication page")
    controller = get_controller(navigator)
    state = controller.state

    st.title("Welcome Back" if not state.is_sign_up else "Join Us")
    st.caption("Sign in to continue" if not state.is_sign_up else "Create your account")

    general = state.errors.get(GENERAL)
    if general:
        st.error(general)

    if state.is_sign_up:
        _field_input(controller, FULL_NAME, "Full name")
    _field_input(controller, EMAIL, "Email")

    _field_input(controller, PASSWORD, "Password", secret=True, visible=state.show_password)
    st.checkbox(
        "Show password",
        value=state.show_password,
        key=f"{_WIDGET_PREFIX}show_{PASSWORD}",
        on_change=controller.toggle_password_visibility,
        args=(PASSWORD,),
    )
    _password_meter(controller)

    if state.is_sign_up:
        _field_input(
            controller, CONFIRM_PASSWORD, "Confirm password", secret=True, visible=state.show_confirm_password
        )
        st.checkbox(
            "Show confirmation",
            value=state.show_confirm_password,
            key=f"{_WIDGET_PREFIX}show_{CONFIRM_PASSWORD}",
            on_change=controller.toggle_password_visibility,
            args=(CONFIRM_PASSWORD,),
        )

    label = "Sign In" if not state.is_sign_up else "Create Account"
    # asyncio.run blocks the rerun, so this only bites after unmount
    if st.button(label, type="primary", disabled=not controller.can_submit):
        outcome = asyncio.run(controller.submit())
        logger.debug(f"Auth form submit outcome: {outcome.value}")
        if outcome is SubmitOutcome.SUCCEEDED:
            unmount_controller()
        st.rerun()

    prompt = "Don't have an account?" if not state.is_sign_up else "Already have an account?"
    st.caption(prompt)
    st.button(
        "Sign up" if not state.is_sign_up else "Sign in",
        on_click=_on_switch_mode,
        args=(controller,),
    )
