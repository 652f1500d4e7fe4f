from datetime import datetime
from typing import List
import logging

import pydantic
from bson import ObjectId
from pymongo.errors import PyMongoError

from learnpath.errors import PersistenceFailure
from learnpath.models.result import Result, ResultCreate
from learnpath.services.quiz_repository import to_bson_time

logger = logging.getLogger(__name__)


def _from_document(doc) -> Result:
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    try:
        return Result.model_validate(doc)
    except pydantic.ValidationError as e:
        logger.error(f"Stored result {doc['id']} is malformed: {str(e)}")
        raise PersistenceFailure("Stored result is malformed")


class ResultRepository:
    def __init__(self, collection):
        self.collection = collection

    async def create(self, result: ResultCreate, now: datetime) -> Result:
        doc = result.model_dump()
        doc.update({"_id": ObjectId(), "createdAt": to_bson_time(now)})
        try:
            await self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error(f"Error saving result: {str(e)}")
            raise PersistenceFailure("Failed to save result")
        logger.info(
            f"Result {doc['_id']} saved for user {result.userId}: {result.score}/{result.total}"
        )
        return _from_document(doc)

    async def find_by_user(self, user_id: str) -> List[Result]:
        try:
            docs = await self.collection.find({"userId": user_id}).to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error loading results for user {user_id}: {str(e)}")
            raise PersistenceFailure("Failed to load results")
        return [_from_document(doc) for doc in docs]
