import html

from .results import ErrorKind, PreviewResponse, StageResult
from .validation import ALLOWED_PREFIX

USAGE_PAGE = (
    "<html><body>"
    "<h1>RTF to HTML Converter</h1>"
    "<p>Please provide a 'url' parameter pointing to an RTF file.</p>"
    f"<p>Example usage: <code>?url={ALLOWED_PREFIX}features-fonts.rtf</code></p>"
    "</body></html>"
)

# Fetch problems answer with the usage page, conversion problems with the
# error page.
_USAGE_STATUS = {
    ErrorKind.MISSING_PARAMETER: 400,
    ErrorKind.DISALLOWED_ORIGIN: 400,
    ErrorKind.FETCH_FAILURE: 500,
    ErrorKind.NULL_DOCUMENT: 500,
}


def error_page(message: str) -> str:
    return (
        "<html><body>"
        "<h1>Error</h1>"
        f"<p>Failed to process the RTF document: {html.escape(message)}</p>"
        "</body></html>"
    )


def render(result: StageResult) -> PreviewResponse:
    """Turn the final stage result into exactly one response."""
    if result.ok:
        return PreviewResponse(status_code=200, body=str(result.value).encode("utf-8"))
    if result.error in _USAGE_STATUS:
        return PreviewResponse(status_code=_USAGE_STATUS[result.error], body=USAGE_PAGE.encode("utf-8"))
    return PreviewResponse(status_code=500, body=error_page(result.message).encode("utf-8"))
