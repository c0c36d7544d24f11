import asyncio
import logging
import os

from fastapi import Depends, FastAPI, Request
from fastapi.responses import Response

from rtf_preview.conversion import PreviewService
from rtf_preview.conversion.adapters import PandocConverter, RequestsFetcher
from rtf_preview.logging_config import setup_logging

app = FastAPI(
    title="RTF Preview Service",
    version=os.getenv("RTF_PREVIEW_VERSION", "0.1.0"),
    description=(
        "Fetches RTF documents from an allow-listed origin and renders them "
        "inline as standalone HTML pages."
    ),
)

# Global configuration defaults
FETCH_TIMEOUT_SEC = float(os.getenv("FETCH_TIMEOUT_SEC", "30"))
CONVERSION_TIMEOUT_SEC = float(os.getenv("CONVERSION_TIMEOUT_SEC", "60"))
PANDOC_PATH = os.getenv("PANDOC_PATH", "pandoc")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PREVIEW_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

SERVICE: PreviewService | None = None


async def get_service() -> PreviewService:
    """Build the preview service on first use. Runs on the event loop, so no lock is needed."""
    global SERVICE
    if SERVICE is None:
        SERVICE = PreviewService(
            fetcher=RequestsFetcher(timeout=FETCH_TIMEOUT_SEC),
            converter=PandocConverter(PANDOC_PATH, timeout=CONVERSION_TIMEOUT_SEC),
            logger=logging.getLogger("rtf_preview.preview"),
        )
        logger.debug("Preview service ready (pandoc=%s)", PANDOC_PATH)
    return SERVICE


@app.get("/health")
def health() -> dict[str, str]:
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.api_route("/", methods=PREVIEW_METHODS)
async def preview(request: Request, service: PreviewService = Depends(get_service)) -> Response:
    """Render the RTF document named by the `url` query parameter as HTML.

    Returns 400 with usage instructions when `url` is missing or outside the
    allow-list, 500 when the fetch or the conversion fails.
    """
    params = {key: request.query_params.getlist(key) for key in request.query_params}
    # Fetch and conversion block; keep them off the event loop
    result = await asyncio.to_thread(service.handle, params)
    return Response(content=result.body, status_code=result.status_code, media_type=result.media_type)


def run() -> None:
    """Run a development ASGI server using uvicorn.

    Exposes the app at host:port (default 0.0.0.0:8080). Set PORT env var to override.
    """
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    # Enable reload in dev unless explicitly disabled
    reload = os.getenv("RELOAD", "true").lower() in {"1", "true", "yes", "on"}

    uvicorn.run("rtf_preview.webapi:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    run()
