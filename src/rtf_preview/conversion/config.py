from dataclasses import dataclass, field
from enum import Enum

DEFAULT_AUTHOR = "https://www.scroogexhtml.com/"
DEFAULT_LANGUAGE = "en"
DEFAULT_PAGE_TITLE = "RTF Preview"

DEFAULT_CSS = """body,p {
  margin: 0;
}
td {
  vertical-align: top;
  border: 1px solid #D3D3D3;
}
table {
  border-collapse: collapse;
}"""


class LengthUnit(str, Enum):
    POINT = "pt"
    EM = "em"
    PIXEL = "px"


@dataclass(frozen=True)
class HtmlHeadConfig:
    page_title: str | None = None
    meta_author: str | None = None
    stylesheet_include: str | None = None
    include_default_font_style: bool = False


@dataclass(frozen=True)
class CharPropConfig:
    convert_language: bool = False
    font_size_unit: LengthUnit = LengthUnit.EM


@dataclass(frozen=True)
class ParaPropConfig:
    convert_indent: bool = False
    convert_paragraph_borders: bool = False


@dataclass(frozen=True)
class ConversionConfig:
    """Options handed to the conversion engine.

    Grouped the way the engine consumes them: head options, character
    (font) formatting, paragraph formatting and special content features.
    """

    add_outer_html: bool = False
    default_language: str | None = None
    html_head: HtmlHeadConfig = field(default_factory=HtmlHeadConfig)
    char_props: CharPropConfig = field(default_factory=CharPropConfig)
    para_props: ParaPropConfig = field(default_factory=ParaPropConfig)
    convert_bookmarks: bool = False
    convert_empty_paragraphs: bool = False
    convert_footnotes: bool = False
    convert_hyperlinks: bool = False
    convert_pictures: bool = False
    convert_tables: bool = False


def build_conversion_config() -> ConversionConfig:
    """Return the fixed configuration used for every preview."""
    return ConversionConfig(
        add_outer_html=True,
        default_language=DEFAULT_LANGUAGE,
        html_head=HtmlHeadConfig(
            page_title=DEFAULT_PAGE_TITLE,
            meta_author=DEFAULT_AUTHOR,
            stylesheet_include=DEFAULT_CSS,
            include_default_font_style=True,
        ),
        char_props=CharPropConfig(
            convert_language=True,
            font_size_unit=LengthUnit.POINT,  # engine default is em
        ),
        para_props=ParaPropConfig(
            convert_indent=True,
            convert_paragraph_borders=True,
        ),
        convert_bookmarks=True,
        convert_empty_paragraphs=True,
        convert_footnotes=True,
        convert_hyperlinks=True,
        convert_pictures=True,
        convert_tables=True,
    )
