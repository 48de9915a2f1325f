from .exceptions import NoContentTypeError


def parse_content_type(header: str | None) -> list[str]:
    if not header:
        return []
    return [segment.strip() for segment in header.split(";")]


def match_content_type(accept: str, header: str | None) -> None:
    """Check that ``accept`` appears as one of the segments of a Content-Type header.

    ``application/json; charset=UTF-8`` matches ``application/json``. The
    comparison is exact: no wildcards, no case folding.

    Raises:
        NoContentTypeError: the header is missing or no segment matches.
    """
    segments = parse_content_type(header)
    if not segments:
        raise NoContentTypeError()
    if accept not in segments:
        raise NoContentTypeError(f"expected {accept!r}, got {header!r}")
