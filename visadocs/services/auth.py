from visadocs.services.exceptions import AuthenticationError


def require_user(user_id: int | None) -> int:
    """Return the caller identity or reject an unauthenticated mutation."""
    if user_id is None:
        raise AuthenticationError("Not authenticated")
    return user_id
