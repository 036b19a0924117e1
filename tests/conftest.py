from __future__ import annotations

import pytest

from bigcommerce_management import ManagementAPI
from bigcommerce_management.services.request_context import request_id_var
from helpers import AUTH_TOKEN, STORE_HASH, RecordingTransport


@pytest.fixture
def make_api():
    """Build a client whose requests go to *handler*; returns (api, transport)."""

    def _make(handler, **kwargs):
        transport = RecordingTransport(handler)
        api = ManagementAPI(STORE_HASH, AUTH_TOKEN, _transport=transport, **kwargs)
        return api, transport

    return _make


@pytest.fixture(autouse=True)
def _clear_request_id():
    token = request_id_var.set("")
    yield
    request_id_var.reset(token)
