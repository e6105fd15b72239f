import logging
from typing import List, Optional

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse

from league_onboarding.input.upload_validator import validate_upload
from league_onboarding.observability.logger import log_event
from league_onboarding.pipeline.processor import process_uploads
from league_onboarding.router import (
    build_batch_response,
    route,
    route_league_create,
    route_league_fetch,
)
from league_onboarding.utils.exceptions import OnboardingError

logger = logging.getLogger("league_onboarding")

app = FastAPI(
    title="League Data Onboarding",
    version="1.0.0"
)


def _bad_request(message: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"success": False, "error": message},
    )


@app.exception_handler(Exception)
async def all_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"},
    )


@app.post("/process")
def process_endpoint(payload: dict):
    try:
        return route(payload)
    except ValueError as e:
        raise _bad_request(str(e))


@app.post("/process/files")
async def process_files_endpoint(files: List[UploadFile] = File(...)):
    results = await process_uploads(files)
    return build_batch_response(results)


@app.post("/upload")
async def upload_endpoint(file: UploadFile = File(...)):
    contents = await file.read()
    try:
        descriptor = validate_upload(file.filename, len(contents), file.content_type)
    except OnboardingError as e:
        log_event("UPLOAD_REJECTED", {"file_name": file.filename, "error": str(e)})
        raise _bad_request(str(e))

    return {
        "success": True,
        **descriptor,
        "message": "File uploaded successfully",
    }


@app.post("/league")
def create_league(payload: dict):
    try:
        return route_league_create(payload)
    except OnboardingError as e:
        raise _bad_request(str(e))


@app.get("/league")
def fetch_league(id: Optional[str] = None):
    try:
        return route_league_fetch(id)
    except OnboardingError as e:
        raise _bad_request(str(e))
