import logging
from collections.abc import Mapping, Sequence

from .config import ConversionConfig, build_conversion_config
from .interfaces import ConverterGateway, FetcherGateway
from .pages import render
from .results import ErrorKind, PreviewResponse, StageResult
from .validation import validate_source


class PreviewService:
    """Core domain service running one preview request end to end.

    This service is framework-agnostic and holds no per-request state. The
    fetcher and converter are gateways so tests can swap in fakes; the
    logger is injected for the same reason.
    """

    def __init__(
        self,
        fetcher: FetcherGateway,
        converter: ConverterGateway,
        *,
        config: ConversionConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._converter = converter
        self._config = config or build_conversion_config()
        self._log = logger or logging.getLogger(__name__)

    @property
    def config(self) -> ConversionConfig:
        return self._config

    def fetch(self, url: str) -> StageResult[bytes]:
        self._log.info("Fetching RTF document: %s", url)
        try:
            data = self._fetcher.fetch(url)
        except Exception as e:
            self._log.warning("Fetch failed for %s: %s", url, e)
            return StageResult.failure(ErrorKind.FETCH_FAILURE, str(e))
        if data is None:
            self._log.warning("Fetch returned no document for %s", url)
            return StageResult.failure(ErrorKind.NULL_DOCUMENT, "no document")
        return StageResult.success(data)

    def convert(self, data: bytes) -> StageResult[str]:
        try:
            html = self._converter.convert(data, self._config)
        except Exception as e:
            self._log.warning("Conversion failed: %s", e)
            return StageResult.failure(ErrorKind.CONVERSION_FAILURE, str(e))
        return StageResult.success(html)

    def handle(self, params: Mapping[str, Sequence[str]]) -> PreviewResponse:
        """Validate, fetch, convert and render; any failure short-circuits to render."""
        source = validate_source(params)
        if not source.ok:
            return render(source)
        document = self.fetch(source.value)  # type: ignore[arg-type]
        if not document.ok:
            return render(document)
        return render(self.convert(document.value))  # type: ignore[arg-type]
