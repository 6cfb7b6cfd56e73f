"""Conversion of code points into the text handed to the document backend.

Any Unicode scalar value becomes a one-character string.  Surrogate code
points (``U+D800``..``U+DFFF``) are not scalar values: they cannot be encoded
as UTF-8 and raise :class:`EncodingError`.  Supplementary-plane values are
returned as single characters; the backend performs its own encoding.
"""

from __future__ import annotations

from glyphsheet.codepoints import MAX_CODE_POINT
from glyphsheet.utils.errors import EncodingError


def code_point_to_text(code_point: int) -> str:
    """Return the one-character string for ``code_point``.

    Raises
    ------
    EncodingError
        If ``code_point`` is out of range or is a surrogate.
    """

    if not 0 <= code_point <= MAX_CODE_POINT:
        raise EncodingError(code_point, f"U+{code_point:04X} is outside the Unicode range")
    text = chr(code_point)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(code_point, cause=exc) from exc
    return text


__all__ = ["code_point_to_text"]
