import json
from typing import Any, List

from league_onboarding.utils.exceptions import FormatError


def _reject_nonstandard_constant(value: str):
    raise ValueError(f"Invalid JSON constant: {value}")


class JSONAdapter:
    """
    JSON ingestion adapter.

    Supports:
    - JSON array → one record per element
    - Any other JSON value → single record
    """

    def __init__(self, content: str):
        self.content = content

    def parse(self) -> List[Any]:
        try:
            parsed = json.loads(
                self.content,
                parse_constant=_reject_nonstandard_constant,
            )
        except ValueError as e:
            # JSONDecodeError is a ValueError subclass
            raise FormatError(f"Invalid JSON: {e}") from e

        if isinstance(parsed, list):
            return parsed

        return [parsed]
