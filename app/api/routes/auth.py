"""Authentication routes for the shared-password session login."""

from fastapi import APIRouter, HTTPException, Request, status

from app.api.dependencies import is_authenticated
from app.schemas.auth import AuthStatus, LoginRequest, SuccessResponse
from app.services.auth import authenticate

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.get("/status", response_model=AuthStatus)
def auth_status(request: Request):
    """Report whether the current session is logged in."""
    return AuthStatus(authenticated=is_authenticated(request))


@router.post("/login", response_model=SuccessResponse)
def login(login_data: LoginRequest, request: Request):
    """Log in with the app password and mark the session as authenticated."""
    if not authenticate(login_data.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid password",
        )

    request.session["authenticated"] = True
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
def logout(request: Request):
    """Clear the session."""
    request.session.clear()
    return SuccessResponse()
