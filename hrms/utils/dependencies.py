"""
Authentication / authorization dependencies.

Both gate variants share one pipeline:
    header -> bearer token -> TokenService.verify -> (optional admin check)
and attach the decoded claims to request.state.claims.
"""
from typing import Optional
from fastapi import Depends, Request

from ..exceptions import (
    Unauthenticated, UnauthenticatedReason, Forbidden, TokenVerificationError
)
from ..services.token_service import TokenClaims, TokenService, get_token_service
from .audit_logger import log_auth_event, get_request_id
from .logging_config import user_id_var


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Take the credential from an 'Authorization: Bearer <token>' header value"""
    if not authorization:
        raise Unauthenticated(UnauthenticatedReason.NO_TOKEN)

    parts = authorization.split()
    if len(parts) < 2:
        raise Unauthenticated(UnauthenticatedReason.MALFORMED_HEADER)

    return parts[1]


def extract_and_verify(authorization: Optional[str], token_service: TokenService) -> TokenClaims:
    token = extract_bearer_token(authorization)
    try:
        return token_service.verify(token)
    except TokenVerificationError as e:
        raise Unauthenticated(UnauthenticatedReason.INVALID_TOKEN, error=e.kind.value)


class AuthGate:
    """
    FastAPI dependency guarding a route.

    AuthGate() admits any authenticated user; AuthGate(admin_only=True)
    additionally requires the isAdmin claim.
    """

    def __init__(self, admin_only: bool = False):
        self.admin_only = admin_only

    async def __call__(
        self,
        request: Request,
        token_service: TokenService = Depends(get_token_service)
    ) -> TokenClaims:
        request_id = get_request_id(request)
        try:
            claims = extract_and_verify(request.headers.get("Authorization"), token_service)
        except Unauthenticated as e:
            log_auth_event(
                "GATE",
                success=False,
                details=f"{e.reason.value} {request.method} {request.url.path}",
                request_id=request_id
            )
            raise

        if self.admin_only and claims.is_admin is not True:
            log_auth_event(
                "GATE",
                user_id=claims.user_id,
                success=False,
                details=f"AdminRequired {request.method} {request.url.path}",
                request_id=request_id
            )
            raise Forbidden()

        request.state.claims = claims
        user_id_var.set(claims.user_id)
        return claims


require_user = AuthGate()
require_admin = AuthGate(admin_only=True)
