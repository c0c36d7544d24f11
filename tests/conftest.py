"""Shared fakes for the fetcher and converter gateways."""

import pytest

from rtf_preview.conversion import ConversionConfig, ConversionError, FetchError, PreviewService

SAMPLE_URL = "https://scroogexhtml.com/rtf/features-fonts.rtf"
SAMPLE_RTF = rb"{\rtf1\ansi\deff0 {\fonttbl {\f0 Times;}} \f0 Hello {\b bold} world.\par}"


class FakeFetcher:
    def __init__(self, data=SAMPLE_RTF, error=None):
        self.data = data
        self.error = error
        self.calls = []

    def fetch(self, url):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.data


class FakeConverter:
    """Renders a minimal standalone page from the config, like a real engine would."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def convert(self, data, config: ConversionConfig):
        self.calls.append((data, config))
        if self.error is not None:
            raise self.error
        head = config.html_head
        return (
            "<!DOCTYPE html>\n"
            f'<html lang="{config.default_language}">'
            f'<head><meta name="author" content="{head.meta_author}" />'
            f"<style>\n{head.stylesheet_include}\n</style></head>"
            "<body><p>Hello <strong>bold</strong> world.</p></body></html>"
        )


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def converter():
    return FakeConverter()


@pytest.fixture
def service(fetcher, converter):
    return PreviewService(fetcher=fetcher, converter=converter)


@pytest.fixture
def fetch_error():
    return FetchError("404 Client Error: Not Found for url")


@pytest.fixture
def conversion_error():
    return ConversionError("Unexpected end of input in group")
