"""
Identity token issuance and verification (stateless JWT).
"""
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

from jose import jwt, ExpiredSignatureError, JWTError
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..config import Settings, get_settings
from ..exceptions import TokenVerificationError, TokenErrorKind


class TokenClaims(BaseModel):
    """Decoded identity token payload"""
    user_id: str = Field(..., alias="userId")
    email: str
    is_admin: bool = Field(default=False, alias="isAdmin")
    issued_at: datetime = Field(..., alias="iat")
    expires_at: datetime = Field(..., alias="exp")

    model_config = {"populate_by_name": True}

    @field_validator("is_admin", mode="before")
    @classmethod
    def admin_only_when_true(cls, v) -> bool:
        # "true", 1 and the like do not grant admin
        return v is True

    def identity(self) -> dict:
        """Claims as passed to issue()"""
        return {"userId": self.user_id, "email": self.email, "isAdmin": self.is_admin}


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens.
    The signing key and algorithm come from Settings; there is no revocation list.
    """

    def __init__(self, settings: Settings):
        self._secret_key = settings.secret_key
        self._algorithm = settings.algorithm
        self.lifetime = timedelta(minutes=settings.access_token_expire_minutes)

    def issue(self, user_id: str, email: str, is_admin: bool = False, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "userId": str(user_id),
            "email": email,
            "isAdmin": bool(is_admin),
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Return decoded claims or raise TokenVerificationError"""
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_iat": True}
            )
        except ExpiredSignatureError as e:
            raise TokenVerificationError(TokenErrorKind.EXPIRED, str(e))
        except JWTError as e:
            raise TokenVerificationError(TokenErrorKind.MALFORMED, str(e))

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as e:
            raise TokenVerificationError(TokenErrorKind.MALFORMED, "missing identity claims") from e


@lru_cache()
def get_token_service() -> TokenService:
    """Process-wide token service built from the cached settings"""
    return TokenService(get_settings())
