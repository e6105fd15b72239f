import json
import os
import shutil
from typing import Any, Dict, List, Optional, Set

from league_onboarding.canonical.result import ProcessingResult
from league_onboarding.outputs.dashboard_stats import build_dashboard_preview
from league_onboarding.outputs.documentation_generator import DocumentationGenerator
from league_onboarding.outputs.schema_json_exporter import SchemaJSONExporter
from league_onboarding.outputs.yaml_schema_exporter import YAMLSchemaExporter
from league_onboarding.pipeline.processor import generate_file_id, process_file

OUTPUT_TYPES = ("JSON", "YAML", "DOCUMENTATION", "ALL_FORMATS")


def process_paths(
    file_paths: List[str], format_hint: Optional[str] = None
) -> List[ProcessingResult]:
    """
    Read and process local files strictly one after another.
    """
    results: List[ProcessingResult] = []
    for path in file_paths:
        file_name = os.path.basename(path)
        try:
            with open(path, "rb") as f:
                content = f.read()
        except OSError as e:
            results.append(ProcessingResult(
                file_id=generate_file_id(),
                file_name=file_name,
                success=False,
                error=f"Failed to process {file_name}: {e}",
            ))
            continue
        results.append(process_file(content, file_name, format_hint=format_hint))
    return results


def clean_output_dir(path: str) -> None:
    if not os.path.isdir(path):
        return
    for name in os.listdir(path):
        full = os.path.join(path, name)
        if os.path.isfile(full) or os.path.islink(full):
            os.remove(full)
        elif os.path.isdir(full):
            shutil.rmtree(full)


def _write_json(path: str, payload: Any) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, default=str)


def build_run_summary(results: List[ProcessingResult], league: Optional[Dict] = None) -> Dict:
    summary = {
        "league": league,
        "results": [r.to_dict(include_records=False) for r in results],
        "dashboard": build_dashboard_preview(results),
    }
    # Drop null values
    return {k: v for k, v in summary.items() if v is not None}


def persist_artifacts(
    results: List[ProcessingResult],
    output_dir: str,
    output_type: str = "ALL_FORMATS",
    league: Optional[Dict] = None,
) -> List[str]:
    """
    Write schemas, documentation and a run summary. Returns written paths.
    """
    output_type = output_type.upper()
    if output_type not in OUTPUT_TYPES:
        raise ValueError(f"Invalid output type: {output_type}. Allowed: {list(OUTPUT_TYPES)}")

    os.makedirs(output_dir, exist_ok=True)
    written: List[str] = []
    seen_names: Set[str] = set()

    for result in results:
        if not result.success:
            continue

        # Same basename from different directories: keep both
        stem = result.file_name
        if stem in seen_names:
            stem = f"{stem}.{result.file_id}"
        seen_names.add(stem)

        if output_type in ("JSON", "ALL_FORMATS"):
            path = os.path.join(output_dir, f"{stem}.schema.json")
            SchemaJSONExporter(result.schema).export_to_file(path)
            written.append(path)

        if output_type in ("YAML", "ALL_FORMATS"):
            path = os.path.join(output_dir, f"{stem}.schema.yaml")
            YAMLSchemaExporter(result.schema).export_to_file(path)
            written.append(path)

    if output_type in ("DOCUMENTATION", "ALL_FORMATS"):
        path = os.path.join(output_dir, "documentation.md")
        markdown = DocumentationGenerator(results, league=league).generate_markdown()
        with open(path, "w", encoding="utf-8") as f:
            f.write(markdown)
        written.append(path)

    # Always write summary
    path = os.path.join(output_dir, "run_summary.json")
    _write_json(path, build_run_summary(results, league=league))
    written.append(path)

    return written
