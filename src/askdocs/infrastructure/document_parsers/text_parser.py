"""Parser for plain text."""

_FALLBACK_ENCODINGS = ("utf-8-sig", "cp1251")


def parse_txt(data: bytes) -> str:
    """Decode as UTF-8 (BOM allowed), then cp1251, then UTF-8 with replacement."""
    for encoding in _FALLBACK_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("utf-8", errors="replace")
