"""Shared fixtures: a scripted HTTP backend and a controllable clock."""

import json

import pytest
import requests
from requests.adapters import BaseAdapter

from estoque.api.client import ApiClient
from estoque.state import BannerTimers
from estoque.token_store import StaticTokenProvider
from estoque.view import InventoryView

BASE_URL = "http://backend.test"


class FakeBackend(BaseAdapter):
    """Transport adapter that answers from a queue of scripted responses."""

    def __init__(self):
        super().__init__()
        self.responses = {}
        self.requests = []

    def add(self, method, path, status=200, body=None, raw=None, error=None):
        self.responses.setdefault((method, path), []).append((status, body, raw, error))

    def send(self, request, **kwargs):
        self.requests.append(request)
        path = request.url[len(BASE_URL):]
        queue = self.responses.get((request.method, path))
        if not queue:
            raise AssertionError(f"Unexpected request {request.method} {path}")

        status, body, raw, error = queue.pop(0) if len(queue) > 1 else queue[0]
        if error is not None:
            raise error

        response = requests.Response()
        response.status_code = status
        response.request = request
        response.url = request.url
        if raw is not None:
            response._content = raw.encode("utf-8")
        elif body is not None:
            response._content = json.dumps(body).encode("utf-8")
            response.headers["Content-Type"] = "application/json"
        else:
            response._content = b""
        return response

    def close(self):
        pass


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def token_provider():
    return StaticTokenProvider("secret-token")


@pytest.fixture
def client(backend, token_provider):
    session = requests.Session()
    session.mount(BASE_URL, backend)
    return ApiClient(BASE_URL, token_provider, session=session, timeout=1.0)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def view(client, clock):
    return InventoryView(client, timers=BannerTimers(clock=clock), banner_seconds=3.0)
