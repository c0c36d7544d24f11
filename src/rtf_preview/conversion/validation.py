from collections.abc import Mapping, Sequence

from .results import ErrorKind, StageResult

# Only documents hosted under this prefix are ever fetched.
ALLOWED_PREFIX = "https://scroogexhtml.com/rtf/"


def validate_source(params: Mapping[str, Sequence[str]]) -> StageResult[str]:
    """Pick the `url` parameter and check it against the allow-list.

    Only the first value bound to `url` is considered. The value is returned
    exactly as received: no normalization or percent-decoding.
    """
    values = params.get("url") if params else None
    if not values:
        return StageResult.failure(ErrorKind.MISSING_PARAMETER, "missing 'url' parameter")
    url = values[0]
    if not url.startswith(ALLOWED_PREFIX):
        return StageResult.failure(ErrorKind.DISALLOWED_ORIGIN, f"url not allowed: {url}")
    return StageResult.success(url)
