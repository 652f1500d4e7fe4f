import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    DATABASE_NAME: str = os.getenv("DATABASE_NAME", "learnpath")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key")
    TOKEN_MAX_AGE: int = int(os.getenv("TOKEN_MAX_AGE", "86400"))
    KNOWLEDGE_POINTS_DIR: str = os.getenv("KNOWLEDGE_POINTS_DIR", "knowledge_points")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    QUIZ_COLLECTION: str = "quizzes"
    COURSE_COLLECTION: str = "courses"
    RESULT_COLLECTION: str = "results"
    

settings = Settings()
