from typing import Optional
import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from itsdangerous import BadSignature, SignatureExpired
from itsdangerous import URLSafeTimedSerializer as Serializer
from pydantic import BaseModel

from learnpath.config import settings
from learnpath.errors import Unauthenticated, Unauthorized

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class Principal(BaseModel):
    id: str
    name: str


def _serializer(secret_key: str = None) -> Serializer:
    return Serializer(secret_key or settings.SECRET_KEY, salt="learnpath-auth")


def issue_token(principal: Principal, secret_key: str = None) -> str:
    return _serializer(secret_key).dumps(principal.model_dump())


def verify_token(token: str, max_age: int = None, secret_key: str = None) -> Principal:
    max_age = settings.TOKEN_MAX_AGE if max_age is None else max_age
    try:
        data = _serializer(secret_key).loads(token, max_age=max_age)
    except SignatureExpired:
        raise Unauthorized("Token expired")
    except BadSignature:
        logger.warning("Rejected request with an invalid token")
        raise Unauthorized("Invalid token")
    return Principal.model_validate(data)


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    if credentials is None:
        raise Unauthenticated("Authentication required")
    return verify_token(credentials.credentials)
