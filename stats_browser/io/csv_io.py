from __future__ import annotations

import base64
import binascii
import logging
import math
import re
from typing import List, Optional, Sequence

from stats_browser.core.exceptions import SampleImportError

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "standard_deviation_data.csv"

_SEPARATORS = re.compile(r"[,\r\n]+")


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Parse one user-typed number.
    Returns None for blank, non-numeric, NaN or infinite input.
    """
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_csv_text(text: str) -> List[float]:
    """
    Read every number out of comma (or newline) separated text.
    Tokens that are not finite numbers are skipped.
    """
    values: List[float] = []
    skipped = 0
    for token in _SEPARATORS.split(text):
        if not token.strip():
            continue
        value = parse_number(token)
        if value is None:
            skipped += 1
            continue
        values.append(value)

    if skipped:
        logger.warning("Skipped %d non-numeric value(s) during CSV import", skipped)
    return values


def decode_upload(contents: str) -> str:
    """
    Decode a dcc.Upload payload ("data:<mime>;base64,<data>") into text.

    Raises:
        SampleImportError: if the payload is not a base64 data URL of UTF-8 text
    """
    try:
        _content_type, content_string = contents.split(",", 1)
        decoded = base64.b64decode(content_string, validate=True)
        return decoded.decode("utf-8-sig")
    except (ValueError, binascii.Error) as e:
        logger.error("Corrupted upload data: %s", e)
        raise SampleImportError("The uploaded file appears to be corrupted.") from e


def samples_to_csv(sample: Sequence[float]) -> str:
    return ",".join(format_number(v) for v in sample)


def format_number(value: float) -> str:
    # 3.0 -> "3" so exported files match what the user typed
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
