"""
Type aliases for request-scoped FastAPI dependencies.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from multilang.texts.registry import TextRegistry


def get_text_registry(request: Request) -> TextRegistry:
    """Return the registry LocaleMiddleware attached to the request.

    Raises:
        HTTPException: 500 if the route is not served through LocaleMiddleware.
    """
    registry = getattr(request.state, "texts", None)
    if registry is None:
        raise HTTPException(status_code=500, detail="Locale middleware not installed")
    return registry


# Request-scoped text registry
TextRegistryDep = Annotated[TextRegistry, Depends(get_text_registry)]

__all__ = ["get_text_registry", "TextRegistryDep"]
