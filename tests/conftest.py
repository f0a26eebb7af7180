import json
import os
import tempfile

os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="talenthub-logs-"))
os.environ.setdefault("API_BASE_URL", "http://auth.test/api")

import httpx
import pytest

from talenthub.api.auth import AuthService
from talenthub.core.controller import SubmissionController
from talenthub.core.form_state import CONFIRM_PASSWORD, EMAIL, FULL_NAME, PASSWORD
from talenthub.core.navigation import Navigator

BASE_URL = "http://auth.test/api"
STRONG_PASSWORD = "Aa1!aaaa"


class RecordingHandler:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, status_code=200, body=None, exc=None):
        self.status_code = status_code
        self.body = {} if body is None else body
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def session():
    return {}


@pytest.fixture
def navigator(session):
    return Navigator(session)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def auth_service(handler):
    return AuthService(BASE_URL, timeout=5, transport=httpx.MockTransport(handler))


@pytest.fixture
def controller(auth_service, navigator, session):
    return SubmissionController(auth_service, navigator, session=session)


def fill_sign_in(controller, email="user@example.com", password="whatever"):
    controller.update_field(EMAIL, email)
    controller.update_field(PASSWORD, password)


def fill_sign_up(controller, email="new@example.com", password=STRONG_PASSWORD, name="Jo", confirm=None):
    controller.update_field(FULL_NAME, name)
    controller.update_field(EMAIL, email)
    controller.update_field(PASSWORD, password)
    controller.update_field(CONFIRM_PASSWORD, password if confirm is None else confirm)
