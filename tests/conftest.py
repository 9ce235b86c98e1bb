"""
Test fixtures for the portfolio updates service.

Provides an application built with the testing configuration, a temporary
subscribers file per test, and a fake email transport that records every
send instead of calling the Resend API.
"""

import pytest
from flask import Flask

from app import create_app
from config import NotifierSettings
from utils.errors import TransportError
from utils.subscribers import SubscriberStore

ADMIN_KEY = 'test-admin-key'


class RecordingTransport:
    """Email transport double that remembers each send"""

    def __init__(self, fail_with=None):
        self.calls = []
        self.fail_with = fail_with

    def send(self, sender, to, bcc, subject, text, html):
        self.calls.append({
            'from': sender,
            'to': to,
            'bcc': bcc,
            'subject': subject,
            'text': text,
            'html': html
        })
        if self.fail_with is not None:
            raise self.fail_with
        return {'id': f'msg-{len(self.calls)}'}


@pytest.fixture
def subscribers_file(tmp_path):
    return tmp_path / 'data' / 'subscribers.json'


@pytest.fixture
def store(subscribers_file) -> SubscriberStore:
    return SubscriberStore(str(subscribers_file))


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def settings() -> NotifierSettings:
    return NotifierSettings(
        admin_key=ADMIN_KEY,
        resend_api_key='re_test',
        from_email='updates@example.com',
        operator_email='owner@example.com',
        timeout=5
    )


@pytest.fixture
def app(subscribers_file, transport) -> Flask:
    """Application wired to a temporary store and the recording transport"""
    return create_app(
        'testing',
        transport=transport,
        SUBSCRIBERS_FILE=str(subscribers_file),
        ADMIN_KEY=ADMIN_KEY,
        RESEND_API_KEY='re_test',
        FROM_EMAIL='updates@example.com',
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def failing_transport() -> RecordingTransport:
    return RecordingTransport(fail_with=TransportError('Failed to send update email.',
                                                       details={'error': 'provider down'}))
