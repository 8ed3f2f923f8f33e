"""FastAPI application exposing the audit over HTTP.

Routes
------
POST /audit     Body: {"url": "https://..."}    -> audit report
GET  /health                                     -> {"status": "ok"}

Lifespan
--------
On startup the app builds one ``SiteAuditor`` (shared by all requests via
``request.app.state.auditor``); each request still runs its own audit with
its own HTTP client.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from seo_audit import __version__
from seo_audit.auditor import SiteAuditor
from seo_audit.config import AuditConfig, settings
from seo_audit.constants import INVALID_URL_ERROR, MISSING_URL_ERROR
from seo_audit.exceptions import ValidationError
from seo_audit.logging_config import setup_logging
from seo_audit.output_manager import JsonReportExporter, ReportExporter

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class AuditRequestBody(BaseModel):
    url: Optional[str] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _validation_response(exc: ValidationError) -> JSONResponse:
    if exc.message == MISSING_URL_ERROR:
        return JSONResponse(status_code=400, content={"error": MISSING_URL_ERROR})
    return JSONResponse(
        status_code=400,
        content={"error": INVALID_URL_ERROR, "message": exc.message},
    )


def _export(exporter: Optional[ReportExporter], report) -> None:
    if exporter is None:
        return
    try:
        exporter.export(report)
    except OSError as e:
        logger.error(f"Could not export report for {report.url}: {e}")


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app(
    auditor: Optional[SiteAuditor] = None,
    exporter: Optional[ReportExporter] = None,
) -> FastAPI:
    """Return a configured FastAPI application.

    Args:
        auditor: Auditor to serve; built from the environment when omitted
        exporter: Optional exporter that persists every successful report
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.auditor = auditor or SiteAuditor(AuditConfig.from_env())
        app.state.exporter = exporter
        logger.info(f"Audit service ready (locale: {app.state.auditor.config.locale})")
        yield

    app = FastAPI(
        title="SEO Page Audit",
        description="Fetches a page, runs the SEO checklist and returns a scored report.",
        version=__version__,
        lifespan=lifespan,
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": MISSING_URL_ERROR})

    @app.post("/audit")
    async def audit_endpoint(request: Request, body: Optional[AuditRequestBody] = None):
        """Audit the page at ``url`` and return the report."""
        url = body.url if body is not None else None
        result = await request.app.state.auditor.run(url)

        if result.success:
            await run_in_threadpool(_export, request.app.state.exporter, result.report)
            return result.report.to_dict()

        if isinstance(result.error, ValidationError):
            return _validation_response(result.error)
        return JSONResponse(status_code=500, content=result.failure.to_dict())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def main() -> None:
    """Run the audit service with uvicorn."""
    import uvicorn

    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    exporter = JsonReportExporter(settings.REPORT_DIR) if settings.REPORT_DIR else None
    app = create_app(exporter=exporter)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
