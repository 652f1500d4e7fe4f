"""
Shared fixtures: in-memory stand-ins for Motor collections, a controllable
clock, and a TestClient wired to them through dependency overrides.
"""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import bson
import pytest
from bson import ObjectId
from bson.codec_options import CodecOptions
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from learnpath.auth import Principal, issue_token
from learnpath.dependencies import get_clock, get_quiz_repository, get_result_repository
from learnpath.main import app
from learnpath.services.quiz_repository import QuizRepository
from learnpath.services.result_repository import ResultRepository


# ── Collection fakes ───────────────────────────────────────────────────────────

def _matches(doc, filter_):
    return all(doc.get(key) == value for key, value in (filter_ or {}).items())


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    async def to_list(self, length=None):
        docs = [copy.deepcopy(d) for d in self._docs]
        return docs if length is None else docs[:length]


class FakeCollection:
    """The subset of the Motor collection API the repositories use."""

    def __init__(self, docs=None):
        self.docs = [copy.deepcopy(d) for d in (docs or [])]

    def find(self, filter_=None):
        return FakeCursor([d for d in self.docs if _matches(d, filter_)])

    async def find_one(self, filter_):
        for doc in self.docs:
            if _matches(doc, filter_):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, doc):
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def find_one_and_update(self, filter_, update, return_document=None):
        for doc in self.docs:
            if _matches(doc, filter_):
                doc.update(copy.deepcopy(update.get("$set", {})))
                return copy.deepcopy(doc)
        return None

    async def find_one_and_delete(self, filter_):
        for idx, doc in enumerate(self.docs):
            if _matches(doc, filter_):
                return self.docs.pop(idx)
        return None


class BsonCollection(FakeCollection):
    """Stores documents the way MongoDB does, through a BSON encode/decode."""

    codec_options = CodecOptions(tz_aware=True)

    def _encode(self, doc):
        return bson.decode(bson.encode(doc), codec_options=self.codec_options)

    async def insert_one(self, doc):
        self.docs.append(self._encode(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def find_one_and_update(self, filter_, update, return_document=None):
        for idx, doc in enumerate(self.docs):
            if _matches(doc, filter_):
                self.docs[idx] = self._encode({**doc, **update.get("$set", {})})
                return copy.deepcopy(self.docs[idx])
        return None


class BrokenCollection:
    """Every operation fails the way an unreachable server would."""

    def find(self, filter_=None):
        raise PyMongoError("connection refused")

    async def find_one(self, filter_):
        raise PyMongoError("connection refused")

    async def insert_one(self, doc):
        raise PyMongoError("connection refused")

    async def find_one_and_update(self, filter_, update, return_document=None):
        raise PyMongoError("connection refused")

    async def find_one_and_delete(self, filter_):
        raise PyMongoError("connection refused")


class FakeClock:
    def __init__(self, start):
        self.now = start

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)

    def __call__(self):
        return self.now


# ── Sample data ────────────────────────────────────────────────────────────────

COURSE_ID = str(ObjectId())


def sample_quiz_payload(**overrides):
    payload = {
        "courseId": COURSE_ID,
        "title": "Python basics",
        "description": "Warm-up questions",
        "questions": [
            {
                "id": "q1",
                "type": "single",
                "content": "Which keyword defines a function?",
                "options": [
                    {"id": "a", "content": "def"},
                    {"id": "b", "content": "func"},
                ],
                "correctAnswer": "a",
                "explanation": "Functions are defined with def.",
            },
            {
                "id": "q2",
                "type": "multiple",
                "content": "Which of these are immutable?",
                "options": [
                    {"id": "a", "content": "tuple"},
                    {"id": "b", "content": "list"},
                    {"id": "c", "content": "str"},
                ],
                "correctAnswer": ["a", "c"],
            },
            {
                "id": "q3",
                "type": "text",
                "content": "Explain what a generator is.",
                "correctAnswer": "A function that yields values lazily.",
            },
        ],
    }
    payload.update(overrides)
    return payload


# ── Fixtures ───────────────────────────────────────────────────────────────────

@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def quiz_collection():
    return BsonCollection()


@pytest.fixture
def course_collection():
    return FakeCollection(
        [{"_id": ObjectId(COURSE_ID), "title": "Intro to Python", "description": "Basics"}]
    )


@pytest.fixture
def result_collection():
    return BsonCollection()


@pytest.fixture
def quiz_repository(quiz_collection, course_collection):
    return QuizRepository(quiz_collection, course_collection)


@pytest.fixture
def result_repository(result_collection):
    return ResultRepository(result_collection)


@pytest.fixture
def client(quiz_repository, result_repository, clock):
    app.dependency_overrides[get_quiz_repository] = lambda: quiz_repository
    app.dependency_overrides[get_result_repository] = lambda: result_repository
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def principal():
    return Principal(id="user-1", name="Ada")


@pytest.fixture
def auth_headers(principal):
    return {"Authorization": f"Bearer {issue_token(principal)}"}
