"""Authentication router for username/password login"""
from fastapi import APIRouter, Depends

from bloglist.deps import get_author_repository
from bloglist.modules.auth.schemas.auth import LoginRequest, Token
from bloglist.modules.auth.services.auth import issue_credential
from bloglist.modules.authors.services.author import AuthorRepository

router = APIRouter()

@router.post("", response_model=Token)
@router.post("/", response_model=Token)
def login(
    *,
    credentials: LoginRequest,
    authors: AuthorRepository = Depends(get_author_repository),
) -> Token:
    """Exchange username and password for a bearer token"""
    return issue_credential(authors, credentials.username, credentials.password)
