from motor.motor_asyncio import AsyncIOMotorClient
from learnpath.config import settings

client = AsyncIOMotorClient(settings.MONGODB_URI, tz_aware=True)
db = client[settings.DATABASE_NAME]
