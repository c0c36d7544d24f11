from typing import Protocol

from .config import ConversionConfig


class FetcherGateway(Protocol):
    def fetch(self, url: str) -> bytes | None:
        """Retrieve the full content at `url` synchronously.

        Raises FetchError (or any transport error) when the read cannot
        complete. Returning None means the fetch produced no document.
        """


class ConverterGateway(Protocol):
    def convert(self, data: bytes, config: ConversionConfig) -> str:
        """Convert RTF bytes into an HTML string using the given config.
        This is a blocking call; callers should offload to threads if needed.
        """
