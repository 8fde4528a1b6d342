"""Charset detection for raw document payloads."""

from __future__ import annotations

from charset_normalizer import from_bytes


def detect_encoding(raw: bytes) -> str:
    if not raw:
        return "utf-8"
    try:
        raw.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    best = from_bytes(raw).best()
    if best and best.encoding:
        name = best.encoding.lower()
        if name in {"windows-1251", "cp1251"}:
            return "cp1251"
        return best.encoding

    for fallback in ("utf-8", "cp1251"):
        try:
            raw.decode(fallback)
            return fallback
        except UnicodeDecodeError:
            continue
    raise ValueError("Could not detect document encoding")


def decode_document(raw: bytes) -> str:
    """Decode a payload with detected encoding, dropping a UTF-8 BOM."""

    text = raw.decode(detect_encoding(raw))
    return text.removeprefix("\ufeff")
