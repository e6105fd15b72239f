import os

# Number of records echoed back as a preview
PREVIEW_ROWS = 5

# Suggestion thresholds
LARGE_DATASET_RECORDS = 1000
MANY_FIELDS = 20

# Dashboard recommendation thresholds
LOW_DATA_QUALITY = 80
HIGH_COMPLEXITY = 70
LARGE_DASHBOARD_RECORDS = 10000

DEFAULT_MAX_UPLOAD_BYTES = 50 * 1024 * 1024  # 50MB


def get_max_upload_bytes() -> int:
    """
    Upload size limit, overridable with ONBOARDING_MAX_UPLOAD_BYTES.
    """
    raw = os.getenv("ONBOARDING_MAX_UPLOAD_BYTES")
    if not raw:
        return DEFAULT_MAX_UPLOAD_BYTES
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            f"ONBOARDING_MAX_UPLOAD_BYTES must be an integer, got: {raw!r}"
        )
