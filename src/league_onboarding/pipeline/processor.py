import uuid
from typing import Any, List, Optional, Sequence, Union

from league_onboarding.canonical.result import ProcessingResult
from league_onboarding.governance.adapter_registry import AdapterRegistry
from league_onboarding.input.content_decoder import decode_content
from league_onboarding.input.format_detector import FormatDetector
from league_onboarding.observability.logger import Stopwatch, log_event
from league_onboarding.pipeline.schema_builder import build_schema, schema_name_from_file
from league_onboarding.pipeline.suggestions import generate_suggestions
from league_onboarding.standards.limits import PREVIEW_ROWS


def generate_file_id() -> str:
    return uuid.uuid4().hex


def parse_records(content: str, file_name: str, format_hint: Optional[str] = None) -> List[Any]:
    """
    Detect the format of a file and parse it into records.
    """
    input_format = FormatDetector(file_name, format_hint=format_hint).detect()
    adapter_cls = AdapterRegistry.get_adapter(input_format)
    return adapter_cls(content).parse()


def process_file(
    content: Union[bytes, str],
    file_name: str,
    file_id: Optional[str] = None,
    format_hint: Optional[str] = None,
) -> ProcessingResult:
    """
    Process one file end to end.

    Flow:
    Decode → Detect format → Parse → Schema → Suggestions

    Never raises: any failure becomes an unsuccessful result so one
    bad file cannot stop the files after it.
    """
    file_id = file_id or generate_file_id()
    timer = Stopwatch()

    log_event("FILE_PROCESSING_STARTED", {
        "file_id": file_id,
        "file_name": file_name,
    })

    try:
        text = decode_content(content)
        records = parse_records(text, file_name, format_hint=format_hint)
        schema = build_schema(records, name=schema_name_from_file(file_name))

        result = ProcessingResult(
            file_id=file_id,
            file_name=file_name,
            success=True,
            schema=schema,
            records=records,
            preview=records[:PREVIEW_ROWS],
            suggestions=generate_suggestions(schema, records),
        )

    except Exception as e:
        log_event("FILE_PROCESSING_FAILED", {
            "file_id": file_id,
            "file_name": file_name,
            "error_type": type(e).__name__,
            "error": str(e),
            "duration_seconds": timer.elapsed(),
        })
        return ProcessingResult(
            file_id=file_id,
            file_name=file_name,
            success=False,
            error=f"Failed to process {file_name}: {e}",
        )

    log_event("FILE_PROCESSING_COMPLETED", {
        "file_id": file_id,
        "file_name": file_name,
        "records": result.record_count,
        "fields": result.field_count,
        "duration_seconds": timer.elapsed(),
    })
    return result


async def process_uploads(uploads: Sequence[Any]) -> List[ProcessingResult]:
    """
    Process uploaded files one after another, in submission order.

    Each upload needs a ``filename`` attribute and an awaitable
    ``read()``, as FastAPI's UploadFile provides. Reading is the only
    await point; inference itself is synchronous.
    """
    results: List[ProcessingResult] = []
    timer = Stopwatch()

    for upload in uploads:
        file_name = getattr(upload, "filename", None) or ""
        try:
            content = await upload.read()
        except Exception as e:
            log_event("FILE_READ_FAILED", {"file_name": file_name, "error": str(e)})
            results.append(ProcessingResult(
                file_id=generate_file_id(),
                file_name=file_name,
                success=False,
                error=f"Failed to process {file_name}: {e}",
            ))
            continue

        results.append(process_file(content, file_name))

    log_event("BATCH_PROCESSING_COMPLETED", {
        "files": len(results),
        "succeeded": sum(1 for r in results if r.success),
        "duration_seconds": timer.elapsed(),
    })
    return results
