"""
Authentication Routes

POST /user/login - Login and get a session token
POST /applicant/signup - Register an applicant account and get a session token
"""

from fastapi import APIRouter, Depends

from jobhunter.core.auth import TokenService, get_token_service
from jobhunter.schemas.schemas import CreateApplicantRequest, LoginRequest, LoginResponse
from jobhunter.services.account_service import AccountService, get_account_service

router = APIRouter(tags=["Authentication"])


@router.post("/user/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Login and receive a session token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = accounts.authenticate(request.email, request.password)
    return LoginResponse(token=tokens.issue_token(user), user=user)


@router.post("/applicant/signup", response_model=LoginResponse, status_code=201)
def signup_applicant(
    request: CreateApplicantRequest,
    accounts: AccountService = Depends(get_account_service),
    tokens: TokenService = Depends(get_token_service),
):
    """Public signup. The new applicant is logged in straight away."""
    user = accounts.create_applicant(request)
    return LoginResponse(token=tokens.issue_token(user), user=user)
