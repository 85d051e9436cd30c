import smtplib

import httpx
import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from config.config import get_db
from quiz_app import app
from services import email_service
from utils.quiz_api import QuizAPI


@pytest.fixture
def db():
    return AsyncMongoMockClient()["quiz_test"]


@pytest.fixture
def sent_emails(monkeypatch):
    sent = []

    def fake_send_email(to_email, subject, html_content):
        sent.append({"to": to_email, "subject": subject, "html": html_content})

    monkeypatch.setattr(email_service, "send_email", fake_send_email)
    return sent


@pytest.fixture
def broken_mailer(monkeypatch):
    def failing_send_email(to_email, subject, html_content):
        raise smtplib.SMTPException("Connection refused")

    monkeypatch.setattr(email_service, "send_email", failing_send_email)


@pytest.fixture
def client(db, sent_emails):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


class ASGIResponse:
    def __init__(self, request):
        self._request = request
        self._response = None

    async def __aenter__(self):
        self._response = await self._request
        return self

    async def __aexit__(self, *exc_info):
        return False

    @property
    def status(self):
        return self._response.status_code

    async def json(self, content_type=None):
        return self._response.json()


class ASGISession:
    """Stands in for aiohttp.ClientSession, sending requests straight into the app."""

    def __init__(self):
        self.client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")

    def request(self, method, url, json=None, headers=None):
        return ASGIResponse(self.client.request(method, url, json=json, headers=headers))

    async def close(self):
        await self.client.aclose()


@pytest.fixture
async def api(db, sent_emails):
    app.dependency_overrides[get_db] = lambda: db
    quiz_api = QuizAPI(base_url="http://testserver/api", session=ASGISession())
    yield quiz_api
    await quiz_api.close()
    app.dependency_overrides.clear()


@pytest.fixture
def quiz_payload():
    return make_quiz_payload


def make_quiz_payload(slug="t-1", **overrides):
    payload = {
        "title": "T",
        "slug": slug,
        "questions": [
            {"id": "q1", "type": "radio", "question": "Pick one", "required": True, "options": ["A", "B"]},
        ],
    }
    payload.update(overrides)
    return payload
