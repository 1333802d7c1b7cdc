from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy import select
from sqlalchemy.orm import Session
from jose import JWTError

from app.db import get_db
from app.models.user import User
from app.security import decode_access_token
from app.domain.taxonomy.scope import Scope, ScopeError, scope_from_params

# token opcional: la navegación es pública, solo cambia lo que ve un admin
bearer_scheme = HTTPBearer(auto_error=False)

def get_optional_user(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    if creds is None:
        return None
    cred_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_access_token(creds.credentials)
        email: str | None = payload.get("sub")
        if email is None:
            raise cred_exc
    except JWTError:
        raise cred_exc
    user = db.execute(select(User).where(User.email == email)).scalar_one_or_none()
    if user is None:
        raise cred_exc
    return user

def get_scope(topicSlug: str | None = None, subTopicSlug: str | None = None) -> Scope | None:
    """Query params topicSlug XOR subTopicSlug -> Scope (o None si no viene ninguno)."""
    try:
        return scope_from_params(topicSlug, subTopicSlug)
    except ScopeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
