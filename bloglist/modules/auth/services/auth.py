"""Credential issuing and identity resolution.

issue_credential never tells an unknown username apart from a wrong password.
resolve_identity only checks the token itself; whether the author still exists
is for the caller to decide.
"""

import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from bloglist.core.errors import InvalidCredentials, InvalidToken, MissingToken
from bloglist.core.security import create_access_token, decode_access_token, verify_password
from bloglist.modules.auth.schemas.auth import Token, TokenPayload
from bloglist.modules.authors.services.author import AuthorRepository

logger = logging.getLogger("bloglist")


def issue_credential(authors: AuthorRepository, username: Optional[str], password: Optional[str]) -> Token:
    author = authors.get_by_username(username) if username else None
    password_correct = (
        author is not None
        and bool(password)
        and verify_password(password, author.password_hash)
    )
    if not password_correct:
        logger.warning(f"Failed login attempt for username {username!r}")
        raise InvalidCredentials()

    token = create_access_token({"id": author.id, "username": author.username})
    logger.info(f"Issued token for author {author.username}")
    return Token(token=token, username=author.username, name=author.name)


def resolve_identity(raw_token: Optional[str]) -> str:
    """Return the author id carried by a bearer token"""
    if not raw_token:
        raise MissingToken()

    payload = decode_access_token(raw_token)
    if payload is None:
        raise InvalidToken()

    try:
        token_data = TokenPayload(**payload)
    except PydanticValidationError:
        raise InvalidToken()
    if not token_data.id:
        logger.warning("Token payload missing 'id' field")
        raise InvalidToken()

    return token_data.id
