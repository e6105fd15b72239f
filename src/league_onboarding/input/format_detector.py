import os
from typing import Optional

from league_onboarding.utils.exceptions import UnsupportedFormatError


class FormatDetector:
    """
    Detects the input file format based on extension or an explicit hint.
    """

    SUPPORTED_FORMATS = {
        "csv": "CSV",
        "json": "JSON",
    }

    # Accepted by upload validation, but no parser exists for them
    SPREADSHEET_EXTENSIONS = {"xlsx", "xls"}

    def __init__(self, file_name: str, format_hint: Optional[str] = None):
        self.file_name = file_name
        self.format_hint = format_hint

    def detect(self) -> str:
        """
        Detect input file format.

        Returns:
            str: Detected format ('CSV' or 'JSON')

        Raises:
            UnsupportedFormatError: If format is unsupported
        """
        if self.format_hint:
            return self._resolve(self.format_hint.lower().lstrip("."))

        if not self.file_name:
            raise UnsupportedFormatError("Input file name is empty")

        _, ext = os.path.splitext(self.file_name)

        if not ext:
            raise UnsupportedFormatError(
                "File has no extension. Unable to detect format."
            )

        return self._resolve(ext.lower().replace(".", ""))

    def _resolve(self, ext: str) -> str:
        if ext in self.SPREADSHEET_EXTENSIONS:
            raise UnsupportedFormatError(
                f"Unsupported file format: {ext.upper()}. "
                "Excel files are accepted for upload but cannot be parsed; "
                "export the sheet as CSV instead."
            )

        if ext not in self.SUPPORTED_FORMATS:
            raise UnsupportedFormatError(
                f"Unsupported file format: {ext.upper()}. "
                f"Supported formats: {list(self.SUPPORTED_FORMATS.keys())}"
            )

        return self.SUPPORTED_FORMATS[ext]
