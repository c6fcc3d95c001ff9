from datetime import datetime, timedelta, timezone
from typing import List, Optional
from jose import JWTError, jwt
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from core.config import settings
from core.roles import UserRole
from schemas.auth import TokenData

security = HTTPBearer(auto_error=False)


def create_access_token(
    subject: str,
    role: UserRole = UserRole.COACH,
    teams: Optional[List[int]] = None,
    expires_delta: Optional[timedelta] = None
):
    expire = datetime.now(timezone.utc) + (
        expires_delta if expires_delta else timedelta(minutes=settings.jwt_expire_minutes)
    )
    to_encode = {
        "sub": str(subject),
        "role": UserRole(role).value,
        "teams": list(teams or []),
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: str, credentials_exception) -> TokenData:
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        subject = payload.get("sub")
        if subject is None:
            raise credentials_exception
        token_data = TokenData(
            subject=subject,
            role=payload.get("role", UserRole.COACH.value),
            teams=payload.get("teams", []),
        )
    except (JWTError, ValueError):
        raise credentials_exception
    return token_data


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenData:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception
    return verify_token(credentials.credentials, credentials_exception)


def ensure_team_access(principal: TokenData, team_id: int, action: str = "manage this team"):
    """Raise 403 unless the token may act on the team"""
    if not principal.can_manage_team(team_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Access denied. Not allowed to {action}"
        )


def require_role(required_role: UserRole):
    """
    Dependency factory checking the token role.

    @router.post("/teams")
    async def create_team(principal: TokenData = Depends(require_role(UserRole.ADMIN))):
        ...
    """
    def role_checker(principal: TokenData = Depends(get_current_principal)):
        if not UserRole.has_permission(principal.role, required_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required role: {required_role.value}"
            )
        return principal
    return role_checker


def get_admin(principal: TokenData = Depends(require_role(UserRole.ADMIN))):
    return principal
