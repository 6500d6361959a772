"""
User Router - registration, login and user info endpoints.
"""
import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..auth import verify_password_or_dummy
from ..crud import create_user, find_user_by_id, find_user_by_username
from ..db import get_db
from ..errors import InvalidCredentials, TokenError, UserNotFound, UsernameTaken
from ..schemas import TokenResponse, UserInfo, UserResponse
from ..utils.tokens import create_token, parse_token
from ..utils.validation import check_credentials

router = APIRouter(prefix="/user", tags=["user"])
logger = logging.getLogger(__name__)


def _issue(request: Request, user_id: int) -> str:
    return create_token(user_id, secret=request.app.state.settings.TOKEN_SECRET)


@router.post("/register", response_model=TokenResponse)
def register(request: Request, username: str = "", password: str = "", db: Session = Depends(get_db)):
    check_credentials(username, password)

    if find_user_by_username(db, username):
        raise UsernameTaken()

    # create_user still raises UsernameTaken if a concurrent insert wins
    user = create_user(db, username, password)
    logger.info("Registered user: user_id=%s, username=%s", user.id, user.username)

    return TokenResponse(user_id=user.id, token=_issue(request, user.id))


@router.post("/login", response_model=TokenResponse)
def login(request: Request, username: str = "", password: str = "", db: Session = Depends(get_db)):
    check_credentials(username, password)

    user = find_user_by_username(db, username)
    # Same hashing work and the same error whether or not the user exists
    if not verify_password_or_dummy(password, user.password if user else None):
        logger.info("Login failure: username=%s", username)
        raise InvalidCredentials()

    logger.info("Login success: user_id=%s, username=%s", user.id, user.username)
    return TokenResponse(user_id=user.id, token=_issue(request, user.id))


@router.get("/", response_model=UserResponse)
def get_user(request: Request, user_id: int, token: str = "", db: Session = Depends(get_db)):
    """
    Return the public profile of user_id.

    Requires a valid token; which token check failed is only logged.
    """
    settings = request.app.state.settings
    try:
        parse_token(token, secret=settings.TOKEN_SECRET, max_age=settings.TOKEN_EXPIRED_TIME)
    except TokenError as e:
        logger.info("Token rejected: %s", e.__class__.__name__)
        raise TokenError() from e

    user = find_user_by_id(db, user_id)
    if not user:
        raise UserNotFound()
    return UserResponse(user=UserInfo(**user.to_dict()))
