"""
Sample import/export: typed numbers, CSV text and Dash upload payloads.
"""

from .csv_io import (
    DEFAULT_EXPORT_FILENAME,
    decode_upload,
    format_number,
    parse_csv_text,
    parse_number,
    samples_to_csv,
)

__all__ = [
    "DEFAULT_EXPORT_FILENAME",
    "decode_upload",
    "format_number",
    "parse_csv_text",
    "parse_number",
    "samples_to_csv",
]
