import uuid
from typing import Dict, List

# ---------------- Pipeline ----------------
from league_onboarding.canonical.result import ProcessingResult
from league_onboarding.pipeline.processor import process_file

# ---------------- Outputs ----------------
from league_onboarding.outputs.dashboard_stats import build_dashboard_preview

# ---------------- League ----------------
from league_onboarding.league.league_service import get_league, register_league

# ---------------- Observability ----------------
from league_onboarding.observability.logger import log_event


# ==========================================================
# FILE PROCESSING
# ==========================================================
def route(payload: Dict) -> Dict:
    """
    Process a single file submitted as JSON.

    Payload:
    fileContent, fileName, fileId (optional), format (optional)
    """
    request_id = uuid.uuid4().hex

    file_content = payload.get("fileContent")
    file_name = payload.get("fileName")
    if not file_content or not file_name:
        log_event("PROCESS_REQUEST_REJECTED", {
            "request_id": request_id,
            "reason": "missing fileContent or fileName",
        })
        raise ValueError("File content and name are required")

    result = process_file(
        file_content,
        file_name,
        file_id=payload.get("fileId"),
        format_hint=payload.get("format"),
    )

    return {"requestId": request_id, **result.to_dict()}


def build_batch_response(results: List[ProcessingResult]) -> Dict:
    return {
        "results": [r.to_dict() for r in results],
        "dashboard": build_dashboard_preview(results),
    }


# ==========================================================
# LEAGUE
# ==========================================================
def route_league_create(payload: Dict) -> Dict:
    league = register_league(payload)

    log_event("LEAGUE_REGISTERED", {
        "league_id": league["id"],
        "sport": league.get("sport"),
    })

    return {
        "success": True,
        "leagueId": league["id"],
        "message": "League information saved successfully",
        "data": league,
    }


def route_league_fetch(league_id: str) -> Dict:
    return {"success": True, "data": get_league(league_id)}
