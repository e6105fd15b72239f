import random
import re
import string
import time
from datetime import datetime, timezone
from typing import Dict

from league_onboarding.utils.exceptions import LeagueValidationError

REQUIRED_LEAGUE_FIELDS = ("name", "sport", "contactEmail", "contactName")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def generate_prefixed_id(prefix: str) -> str:
    """
    <prefix>_<epoch millis>_<random suffix>
    """
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=11))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


def validate_league_info(data: Dict) -> None:
    missing = [f for f in REQUIRED_LEAGUE_FIELDS if not data.get(f)]
    if missing:
        raise LeagueValidationError(
            f"Missing required fields: {', '.join(missing)}"
        )

    if not EMAIL_PATTERN.match(str(data["contactEmail"])):
        raise LeagueValidationError("Invalid email format")


def register_league(data: Dict) -> Dict:
    """
    Validate league information and echo it back with an id.
    Nothing is stored.
    """
    validate_league_info(data)

    league_id = generate_prefixed_id("league")
    return {
        **data,
        "id": league_id,
        "createdAt": datetime.now(timezone.utc).isoformat(),
        "status": "onboarding",
    }


def get_league(league_id: str) -> Dict:
    """
    Canned league record for the given id.
    """
    if not league_id:
        raise LeagueValidationError("League ID is required")

    return {
        "id": league_id,
        "name": "Sample Basketball League",
        "sport": "Basketball",
        "tier": "amateur",
        "contactEmail": "contact@sampleleague.com",
        "contactName": "John Smith",
        "location": {
            "country": "United States",
            "region": "California",
            "city": "San Francisco",
        },
        "status": "active",
        "createdAt": datetime.now(timezone.utc).isoformat(),
    }
