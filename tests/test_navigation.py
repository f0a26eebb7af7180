from talenthub.core.auth import clear_auth_state, set_auth_state
from talenthub.core.navigation import Navigator, resolve_route
from talenthub.core.session import (
    REDIRECT_FROM_KEY,
    ROUTE_KEY,
    get_current_user,
    init_session_state,
    is_authenticated,
)


def test_init_session_state_defaults():
    session = {}
    init_session_state(session)
    assert session == {ROUTE_KEY: "/", REDIRECT_FROM_KEY: None, "email": None}
    assert not is_authenticated(session)


def test_init_session_state_keeps_existing_values():
    session = {ROUTE_KEY: "/profile", "email": "a@b.co"}
    init_session_state(session)
    assert session[ROUTE_KEY] == "/profile"
    assert is_authenticated(session)


def test_landing_always_redirects_to_auth():
    session = {}
    navigator = Navigator(session)
    assert resolve_route(navigator, session) == "/auth"
    assert session[ROUTE_KEY] == "/auth"
    assert session[REDIRECT_FROM_KEY] is None

    set_auth_state("a@b.co", session)
    navigator.navigate("/")
    assert resolve_route(navigator, session) == "/auth"


def test_protected_route_remembers_origin():
    session = {ROUTE_KEY: "/profile"}
    navigator = Navigator(session)
    assert resolve_route(navigator, session) == "/auth"
    assert navigator.redirect_from == "/profile"


def test_protected_route_open_when_signed_in():
    session = {ROUTE_KEY: "/profile"}
    set_auth_state("a@b.co", session)
    assert resolve_route(Navigator(session), session) == "/profile"


def test_clear_auth_state():
    session = {ROUTE_KEY: "/profile"}
    set_auth_state("a@b.co", session)
    assert get_current_user(session) == {"email": "a@b.co"}
    clear_auth_state(session)
    assert session == {}
    assert not is_authenticated(session)
