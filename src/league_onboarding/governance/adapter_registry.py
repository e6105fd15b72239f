from league_onboarding.adapters.csv_adapter import CSVAdapter
from league_onboarding.adapters.json_adapter import JSONAdapter
from league_onboarding.utils.exceptions import UnsupportedFormatError


class AdapterRegistry:
    """
    Maps detected input formats to adapter implementations.
    """

    _REGISTRY = {
        "CSV": CSVAdapter,
        "JSON": JSONAdapter,
    }

    @classmethod
    def get_adapter(cls, format_name: str):
        if not format_name:
            raise ValueError("Format name must not be empty")

        key = format_name.upper()

        if key not in cls._REGISTRY:
            raise UnsupportedFormatError(
                f"No adapter registered for format: {format_name}"
            )

        return cls._REGISTRY[key]
