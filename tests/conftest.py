"""Pytest configuration and fixtures for backend tests.

This module provides shared fixtures for testing the contact API,
including API Gateway events, configuration and a fake mail transport.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Optional
from uuid import uuid4

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

# Lambda entrypoints read configuration at import time
os.environ.setdefault('FROM_EMAIL', 'no-reply@mail.example.com')
os.environ.setdefault('TO_EMAIL', 'owner@example.com')
os.environ.setdefault('ALLOWED_ORIGINS', 'https://example.com,http://localhost:3000')

ALLOWED_ORIGIN = 'https://example.com'


# --- Configuration Fixtures ---


@pytest.fixture
def contact_config():
    """Explicit configuration injected into the dispatcher."""
    from contact_api.config import ContactConfig

    return ContactConfig(
        sender_email='no-reply@mail.example.com',
        owner_email='owner@example.com',
        allowed_origins=(ALLOWED_ORIGIN, 'http://localhost:3000'),
        site_name='Example Site',
    )


@pytest.fixture
def clean_config_env(monkeypatch):
    """Remove contact configuration variables from the environment."""
    for name in ('FROM_EMAIL', 'TO_EMAIL', 'ALLOWED_ORIGINS', 'SITE_NAME', 'SES_REGION'):
        monkeypatch.delenv(name, raising=False)
    from contact_api.config import get_contact_config

    get_contact_config.cache_clear()
    yield monkeypatch
    get_contact_config.cache_clear()


# --- Payload Fixtures ---


@pytest.fixture
def valid_body() -> dict:
    """A contact form body that passes validation."""
    return {
        'name': 'A',
        'email': 'a@example.com',
        'title': 'Hi',
        'message': 'Hello',
    }


@pytest.fixture
def contact_payload(valid_body):
    """A validated payload built from the valid body."""
    from contact_api.api.schemas import ContactPayload

    return ContactPayload.model_validate(valid_body)


# --- API Event Fixtures ---


def make_event(
    method: str = 'POST',
    body: Optional[object] = None,
    origin: Optional[str] = ALLOWED_ORIGIN,
) -> dict:
    """Build an API Gateway proxy event."""
    headers = {'content-type': 'application/json'}
    if origin is not None:
        headers['origin'] = origin
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    return {
        'httpMethod': method,
        'path': '/contact',
        'queryStringParameters': None,
        'headers': headers,
        'requestContext': {
            'requestId': str(uuid4()),
        },
        'body': body,
        'isBase64Encoded': False,
    }


@pytest.fixture
def api_gateway_event(valid_body) -> dict:
    """POST event carrying a valid submission."""
    return make_event('POST', valid_body)


# --- Mock Fixtures ---


class FakeTransport:
    """Records sends and optionally fails the n-th call."""

    def __init__(self, fail_on: tuple = (), error: Optional[Exception] = None):
        self.sent: list = []
        self.fail_on = fail_on
        self.error = error
        self.calls = 0

    def send(self, *, source, message) -> None:
        self.calls += 1
        if self.calls in self.fail_on:
            raise self.error or RuntimeError('transport down')
        self.sent.append((source, message))


@pytest.fixture
def transport() -> FakeTransport:
    """A transport that accepts every message."""
    return FakeTransport()


@pytest.fixture
def mock_ses_client(mocker):
    """Mock the cached SES client used by the email service."""
    from contact_api.services.aws_clients import clear_client_cache

    clear_client_cache()
    client = mocker.MagicMock()
    client.send_email.return_value = {'MessageId': 'ses-message-id'}
    mocker.patch('contact_api.services.email.get_ses_client', return_value=client)
    yield client
    clear_client_cache()


@pytest.fixture
def mock_boto3_client(mocker):
    """Mock boto3 client for AWS service calls."""
    mock = mocker.patch('boto3.client')
    return mock
