import json
import subprocess
import tempfile

import requests

from .. import __version__
from .ast_filter import prune_document
from .config import ConversionConfig, LengthUnit
from .errors import ConversionError, FetchError
from .interfaces import ConverterGateway, FetcherGateway

USER_AGENT = f"rtf-preview/{__version__}"


class RequestsFetcher(FetcherGateway):
    def __init__(self, *, timeout: float = 30.0) -> None:
        self._timeout = timeout

    def fetch(self, url: str) -> bytes | None:
        """Download the whole resource into memory. A single attempt, no retry."""
        try:
            resp = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(str(e)) from e
        return resp.content


# RTF's implicit default is \fs24, i.e. 12pt
_DEFAULT_FONT_SIZE = {
    LengthUnit.POINT: "12pt",
    LengthUnit.EM: "1em",
    LengthUnit.PIXEL: "16px",
}


def default_font_style(unit: LengthUnit) -> str:
    return f"body {{\n  font-family: \"Times New Roman\", serif;\n  font-size: {_DEFAULT_FONT_SIZE[unit]};\n}}"


def pandoc_writer_args(config: ConversionConfig) -> list[str]:
    """Translate the conversion config into pandoc HTML writer options.

    pandoc's own document CSS is a page layout, so it is always switched off;
    the default font style is emitted as a plain body rule instead.
    """
    args: list[str] = []
    if config.add_outer_html:
        args.append("--standalone")
        if config.convert_pictures:
            args.append("--embed-resources")
    head = config.html_head
    if head.page_title:
        args += ["-M", f"pagetitle={head.page_title}"]
    if head.meta_author:
        args += ["-M", f"author={head.meta_author}"]
    if config.default_language:
        args += ["-M", f"lang={config.default_language}"]
    styles = []
    if head.include_default_font_style:
        styles.append(default_font_style(config.char_props.font_size_unit))
    if head.stylesheet_include:
        styles.append(head.stylesheet_include)
    if styles:
        css = "\n".join(styles)
        args += ["-V", f"header-includes=<style>\n{css}\n</style>"]
    args += ["-M", "document-css=false"]
    return args


class PandocConverter(ConverterGateway):
    """Convert RTF to HTML with the pandoc executable.

    Runs two passes: the RTF reader emits pandoc's JSON document tree, which
    is pruned according to the feature toggles and then handed to the HTML5
    writer. Pictures are extracted to a scratch directory by the reader and
    picked up from there by the writer. Requires pandoc 3.1.3 or newer for
    the RTF reader.
    """

    def __init__(self, pandoc_path: str = "pandoc", *, timeout: float | None = 60.0) -> None:
        self._pandoc = pandoc_path
        self._timeout = timeout

    def convert(self, data: bytes, config: ConversionConfig) -> str:
        with tempfile.TemporaryDirectory(prefix="rtf-preview-") as media_dir:
            tree_bytes = self._run(["--from=rtf", "--to=json", f"--extract-media={media_dir}"], data)
            try:
                tree = json.loads(tree_bytes)
            except ValueError as e:
                raise ConversionError("pandoc produced an unreadable document tree") from e

            tree = prune_document(tree, config)
            payload = json.dumps(tree).encode("utf-8")
            html = self._run(
                ["--from=json", "--to=html5", *pandoc_writer_args(config), f"--resource-path={media_dir}"],
                payload,
            )
        try:
            return html.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConversionError("pandoc produced output that is not valid UTF-8") from e

    def _run(self, args: list[str], payload: bytes) -> bytes:
        cmd = [self._pandoc, *args, "--output=-"]
        try:
            proc = subprocess.run(
                cmd,
                input=payload,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
                timeout=self._timeout,
            )
        except FileNotFoundError as e:
            raise ConversionError(f"pandoc executable not found: {self._pandoc}") from e
        except subprocess.TimeoutExpired as e:
            raise ConversionError(f"pandoc timed out after {self._timeout} seconds") from e

        if proc.returncode != 0:
            detail = proc.stderr.decode("utf-8", errors="ignore").strip()
            raise ConversionError(detail or f"pandoc exited with status {proc.returncode}")
        return proc.stdout
