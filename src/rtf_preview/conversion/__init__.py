"""
Domain layer for RTF previews.
Provides interfaces (gateways), the fixed conversion configuration and a
service that runs the validate -> fetch -> convert -> render pipeline, so the
HTTP front-end only has to translate requests and responses.
"""

from .config import ConversionConfig, LengthUnit, build_conversion_config
from .errors import ConversionError, FetchError, PreviewError
from .interfaces import ConverterGateway, FetcherGateway
from .results import ErrorKind, PreviewResponse, StageResult
from .service import PreviewService
from .validation import ALLOWED_PREFIX, validate_source
