"""Locale middleware: per-request locale detection and text registry."""

from typing import Iterable, Optional

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from multilang.logging import bind_request_context, get_module_logger
from multilang.services.providers import get_text_service
from multilang.texts.exceptions import StoreUnavailableError
from multilang.texts.resolvers import path_segments
from multilang.texts.service import TextService

logger = get_module_logger()

DEFAULT_EXCLUDED_PREFIXES = ("api", "health", "docs", "openapi.json")


class LocaleMiddleware(BaseHTTPMiddleware):
    """Resolve the locale from the first path segment of each request.

    Requests without a valid locale segment are redirected (302) to the
    same path under the default locale. Other requests get a fresh
    TextRegistry, activated for the detected locale, on
    ``request.state.texts``. Once the response is produced, missing keys are
    persisted when autosave is allowed.
    """

    def __init__(
        self,
        app,
        text_service: Optional[TextService] = None,
        excluded_prefixes: Iterable[str] = DEFAULT_EXCLUDED_PREFIXES,
    ):
        super().__init__(app)
        self.text_service = text_service
        self.excluded_prefixes = frozenset(excluded_prefixes)

    async def dispatch(self, request, call_next):
        segments = path_segments(request.url.path)
        if segments and segments[0] in self.excluded_prefixes:
            return await call_next(request)

        service = self.text_service or get_text_service()

        with bind_request_context(
            correlation_id=request.headers.get("X-Correlation-ID"),
            request_path=request.url.path,
            request_method=request.method,
        ):
            target = service.detector.redirect_target(segments, request.url.query)
            if target is not None:
                logger.info("locale_redirect", target=target)
                return RedirectResponse(target, status_code=302)

            locale = service.detector.detect(segments)
            registry = service.create_registry()
            await run_in_threadpool(registry.activate, locale)
            request.state.locale = locale
            request.state.texts = registry

            response = await call_next(request)
            response.headers["Content-Language"] = locale

            if service.autosave_allowed():
                try:
                    await run_in_threadpool(service.save_missing, registry)
                except StoreUnavailableError as e:
                    logger.error(
                        "missing_texts_flush_failed",
                        locale=locale,
                        missing_count=len(registry.missing_keys()),
                        error=str(e),
                    )

            return response
