"""
Pytest Configuration and Fixtures
"""
import json
from unittest.mock import Mock

import pytest
import requests
from app import create_app


def _mock_http_response(json_data, status_code: int = 200) -> Mock:
    """Return a mock requests.Response whose .json() returns json_data."""
    resp = Mock()
    resp.ok = 200 <= status_code < 400
    resp.status_code = status_code
    if isinstance(json_data, Exception):
        resp.json.side_effect = json_data
        resp.text = "<html>Service Unavailable</html>"
    else:
        resp.json.return_value = json_data
        resp.text = json.dumps(json_data)
    if resp.ok:
        resp.raise_for_status.return_value = None
    else:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Server Error")
    resp.headers = {"Content-Type": "application/json"}
    return resp


def _token_response(token: str = "mvola_tok_abc", expires_in=3600) -> Mock:
    """Valid MVola OAuth token response"""
    return _mock_http_response({
        "access_token": token,
        "scope": "EXT_INT_MVOLA_SCOPE",
        "token_type": "Bearer",
        "expires_in": expires_in,
    })


@pytest.fixture(scope='function')
def app():
    """Create application for testing, with a fresh token cache per test"""
    app = create_app('testing')

    ctx = app.app_context()
    ctx.push()

    yield app

    ctx.pop()


@pytest.fixture(scope='function')
def client(app):
    """Create a test client"""
    return app.test_client()


@pytest.fixture(scope='function')
def provider(app):
    """The MVola provider owned by the app"""
    return app.extensions['mvola']


@pytest.fixture
def initiate_body():
    return {
        'amount': 5000,
        'customerMSISDN': '0341234567',
        'descriptionText': 'Commande 42',
        'correlationId': 'ORDER-42',
    }


@pytest.fixture
def initiate_ack():
    return {
        'status': 'pending',
        'serverCorrelationId': '421a22a2-ef1d-42bc-9452-f4939a3d5cdf',
        'notificationMethod': 'callback',
    }


@pytest.fixture
def http_response():
    """Factory for mocked requests.Response objects"""
    return _mock_http_response


@pytest.fixture
def token_response():
    """Factory for mocked MVola token responses"""
    return _token_response
