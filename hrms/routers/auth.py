from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import NotFound
from ..repositories.employees import EmployeeRepository
from ..schemas.auth import LoginRequest, TokenResponse, ClaimsResponse
from ..schemas.base import MessageResponse
from ..services.token_service import TokenClaims, TokenService, get_token_service
from ..utils.audit_logger import log_auth_event, get_request_id
from ..utils.dependencies import require_user
from ..utils.rate_limiter import limiter, get_rate_limit, get_real_client_ip

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=TokenResponse, status_code=status.HTTP_200_OK)
@limiter.limit(get_rate_limit("login"))
def login(
    request: Request,
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service)
):
    """Exchange email and password for an identity token"""
    request_id = get_request_id(request)
    client_ip = get_real_client_ip(request)

    employee = EmployeeRepository(db).find_by_email(credentials.email)
    if not employee:
        log_auth_event(
            "LOGIN",
            email=credentials.email,
            success=False,
            details="Unknown email",
            ip_address=client_ip,
            request_id=request_id
        )
        raise NotFound("Invalid email id")

    if not employee.compare_password(credentials.password):
        log_auth_event(
            "LOGIN",
            email=credentials.email,
            user_id=employee.id,
            success=False,
            details="Invalid password",
            ip_address=client_ip,
            request_id=request_id
        )
        raise NotFound("Invalid username or password")

    token = token_service.issue(
        user_id=employee.id,
        email=employee.email,
        is_admin=employee.is_admin
    )

    log_auth_event(
        "LOGIN",
        email=employee.email,
        user_id=employee.id,
        success=True,
        ip_address=client_ip,
        request_id=request_id
    )

    return TokenResponse(token=token)


@router.post("/logout", response_model=MessageResponse)
def logout(request: Request):
    """
    Tokens are stateless and cannot be revoked server-side;
    the client discards its token.
    """
    log_auth_event("LOGOUT", success=True, request_id=get_request_id(request))
    return MessageResponse(message="Logout successful")


@router.get("/me", response_model=ClaimsResponse)
async def get_current_claims(claims: TokenClaims = Depends(require_user)):
    """Claims carried by the caller's token"""
    return ClaimsResponse.model_validate(claims)
