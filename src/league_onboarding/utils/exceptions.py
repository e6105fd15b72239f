class OnboardingError(Exception):
    """
    Base exception for all onboarding errors
    """
    pass


class FormatError(OnboardingError):
    """
    Raised when content does not parse as its declared format
    """
    pass


class UnsupportedFormatError(OnboardingError):
    """
    Raised when a file format cannot be handled by the inference engine
    """
    pass


class LeagueValidationError(OnboardingError):
    """
    Raised when submitted league information is incomplete or invalid
    """
    pass


class UploadValidationError(OnboardingError):
    """
    Raised when an uploaded file is rejected before processing
    """
    pass
