"""API dependencies for session authentication."""

from fastapi import HTTPException, Request, status


def is_authenticated(request: Request) -> bool:
    """Check the session cookie for a successful login."""
    return bool(request.session.get("authenticated"))


def require_auth(request: Request) -> None:
    """Reject requests without an authenticated session."""
    if not is_authenticated(request):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
