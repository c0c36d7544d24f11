class PreviewError(Exception):
    """Base class for failures raised by preview gateways."""


class FetchError(PreviewError):
    """The remote document could not be retrieved."""


class ConversionError(PreviewError):
    """The conversion engine rejected the document or failed to run."""
