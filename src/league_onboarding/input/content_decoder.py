from typing import Union

import chardet

UTF8_BOM = "\ufeff"


def detect_encoding(raw: bytes) -> str:
    result = chardet.detect(raw)
    return result.get("encoding") or "utf-8"


def decode_content(raw: Union[bytes, str]) -> str:
    """
    Turn uploaded file content into text.

    UTF-8 is tried first; anything else is decoded with the encoding
    chardet detects, replacing undecodable sequences.
    """
    if isinstance(raw, str):
        text = raw
    else:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            encoding = detect_encoding(raw)
            try:
                text = raw.decode(encoding, errors="replace")
            except LookupError:
                text = raw.decode("utf-8", errors="replace")

    if text.startswith(UTF8_BOM):
        text = text[len(UTF8_BOM):]
    return text
