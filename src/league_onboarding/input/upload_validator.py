import re
from typing import Dict, Optional

from league_onboarding.league.league_service import generate_prefixed_id
from league_onboarding.standards.limits import get_max_upload_bytes
from league_onboarding.utils.exceptions import UploadValidationError

ALLOWED_CONTENT_TYPES = {
    "text/csv",
    "application/json",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-excel",
}

ALLOWED_EXTENSION_PATTERN = re.compile(r"\.(csv|json|xlsx|xls)$", re.IGNORECASE)


def validate_upload(file_name: str, size: int, content_type: Optional[str] = None) -> Dict:
    """
    Check an uploaded file before processing.

    Returns an upload descriptor with a generated file id.
    """
    if not file_name:
        raise UploadValidationError("No file provided")

    max_bytes = get_max_upload_bytes()
    if size > max_bytes:
        raise UploadValidationError(
            f"File size too large. Maximum size is {max_bytes // (1024 * 1024)}MB."
        )

    if content_type not in ALLOWED_CONTENT_TYPES and not ALLOWED_EXTENSION_PATTERN.search(file_name):
        raise UploadValidationError(
            "Invalid file type. Only CSV, JSON, and Excel files are allowed."
        )

    return {
        "fileId": generate_prefixed_id("file"),
        "fileName": file_name,
        "fileSize": size,
        "fileType": content_type,
    }
