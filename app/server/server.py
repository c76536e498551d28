from typing import Optional

from fastapi import APIRouter, FastAPI

from multilang.logging import get_module_logger
from multilang.services import TextServiceDep
from multilang.texts.service import TextService
from server.dependencies import TextRegistryDep
from server.locale_middleware import LocaleMiddleware

logger = get_module_logger()

api_router = APIRouter()


@api_router.get("/health")
def health():
    return {"status": "ok"}


@api_router.get("/api/texts")
def export_texts(service: TextServiceDep, locale: Optional[str] = None):
    """Export stored texts grouped by locale."""
    return service.export_texts(locale)


@api_router.get("/{locale}/texts/{key}")
def get_text(locale: str, key: str, texts: TextRegistryDep):
    """Resolve one text key for the request's locale."""
    return {"locale": texts.current_locale(), "key": key, "text": texts.get(key)}


def create_app(text_service: Optional[TextService] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        text_service: Optional service instance; the provider singleton is
            used when omitted.
    """
    handler = FastAPI(title="multilang")
    handler.add_middleware(LocaleMiddleware, text_service=text_service)
    handler.include_router(api_router)
    logger.info("application_created")
    return handler
