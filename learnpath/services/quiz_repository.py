from datetime import datetime
from typing import List
import logging

import pydantic
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from learnpath.errors import NotFound, PersistenceFailure, ValidationError
from learnpath.models.quiz import Quiz, QuizCreate, QuizUpdate
from learnpath.services.quiz_validation import validate_quiz

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = {"courseId", "title", "description", "questions"}


def to_object_id(value: str) -> ObjectId:
    if not ObjectId.is_valid(value):
        raise NotFound("Quiz not found")
    return ObjectId(value)


def to_bson_time(now: datetime) -> datetime:
    """BSON dates keep milliseconds; truncate so stored and returned values agree."""
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _from_document(doc) -> Quiz:
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    try:
        return Quiz.model_validate(doc)
    except pydantic.ValidationError as e:
        logger.error(f"Stored quiz {doc['id']} is malformed: {str(e)}")
        raise PersistenceFailure("Stored quiz is malformed")


class QuizRepository:
    """Quiz persistence over a Motor collection. Every write is validated first."""

    def __init__(self, collection, course_collection):
        self.collection = collection
        self.course_collection = course_collection

    async def find_all(self, populate: bool = True) -> List[Quiz]:
        try:
            docs = await self.collection.find({}).to_list(length=None)
            if populate:
                docs = [await self._populate_course(doc) for doc in docs]
        except PyMongoError as e:
            logger.error(f"Error listing quizzes: {str(e)}")
            raise PersistenceFailure("Failed to load quizzes")
        return [_from_document(doc) for doc in docs]

    async def find_by_id(self, quiz_id: str, populate: bool = False) -> Quiz:
        oid = to_object_id(quiz_id)
        try:
            doc = await self.collection.find_one({"_id": oid})
            if doc is not None and populate:
                doc = await self._populate_course(doc)
        except PyMongoError as e:
            logger.error(f"Error loading quiz {quiz_id}: {str(e)}")
            raise PersistenceFailure("Failed to load quiz")
        if doc is None:
            raise NotFound("Quiz not found")
        return _from_document(doc)

    async def create(self, payload: QuizCreate, now: datetime) -> Quiz:
        validate_quiz(payload)
        now = to_bson_time(now)
        doc = payload.model_dump()
        doc.update({"_id": ObjectId(), "createdAt": now, "updatedAt": now})
        try:
            await self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error(f"Error creating quiz: {str(e)}")
            raise PersistenceFailure("Failed to create quiz")
        logger.info(f"Quiz {doc['_id']} created for course {payload.courseId}")
        return _from_document(doc)

    async def update(self, quiz_id: str, patch: QuizUpdate, now: datetime) -> Quiz:
        existing = await self.find_by_id(quiz_id)
        try:
            merged = QuizCreate.model_validate(
                {
                    **existing.model_dump(include=WRITABLE_FIELDS),
                    **patch.model_dump(exclude_unset=True),
                }
            )
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid quiz update: {e.errors()[0]['msg']}")
        validate_quiz(merged)
        now = to_bson_time(now)

        try:
            doc = await self.collection.find_one_and_update(
                {"_id": to_object_id(quiz_id)},
                {"$set": {**merged.model_dump(), "updatedAt": now}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Error updating quiz {quiz_id}: {str(e)}")
            raise PersistenceFailure("Failed to update quiz")
        if doc is None:
            raise NotFound("Quiz not found")
        logger.info(f"Quiz {quiz_id} updated")
        return _from_document(doc)

    async def delete(self, quiz_id: str) -> None:
        oid = to_object_id(quiz_id)
        try:
            doc = await self.collection.find_one_and_delete({"_id": oid})
        except PyMongoError as e:
            logger.error(f"Error deleting quiz {quiz_id}: {str(e)}")
            raise PersistenceFailure("Failed to delete quiz")
        if doc is None:
            raise NotFound("Quiz not found")
        logger.info(f"Quiz {quiz_id} deleted")

    async def _populate_course(self, doc):
        course_id = doc.get("courseId")
        if not isinstance(course_id, str) or not ObjectId.is_valid(course_id):
            return doc
        course = await self.course_collection.find_one({"_id": ObjectId(course_id)})
        if course is None:
            return doc
        return {
            **doc,
            "courseId": {
                "id": str(course["_id"]),
                "title": course.get("title", ""),
                "description": course.get("description"),
            },
        }
