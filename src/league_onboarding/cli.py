import argparse
import json

from league_onboarding.execution.artifacts import (
    OUTPUT_TYPES,
    clean_output_dir,
    persist_artifacts,
    process_paths,
)
from league_onboarding.outputs.dashboard_stats import build_dashboard_preview


class C:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"


def cprint(text: str, color: str = C.RESET, bold: bool = False):
    prefix = (C.BOLD if bold else "") + color
    print(f"{prefix}{text}{C.RESET}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="League data onboarding CLI")

    parser.add_argument("files", nargs="+", help="CSV or JSON files to process")
    parser.add_argument(
        "--format",
        choices=["csv", "json"],
        help="Force a format instead of detecting it from the extension",
    )
    parser.add_argument(
        "--output",
        default="ALL_FORMATS",
        choices=list(OUTPUT_TYPES),
        help="Output type",
    )
    parser.add_argument("--output-dir", default="artifacts")
    parser.add_argument("--clean-output-dir", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.clean_output_dir:
        clean_output_dir(args.output_dir)

    cprint("\n[START] Processing files", C.BLUE, bold=True)
    cprint(f"[INFO] Files={len(args.files)}  Output={args.output}", C.DIM)

    results = process_paths(args.files, format_hint=args.format)

    for result in results:
        if result.success:
            cprint(
                f"[OK] {result.file_name}: {result.record_count} records, "
                f"{result.field_count} fields",
                C.GREEN,
            )
            for suggestion in result.suggestions:
                cprint(f"     - {suggestion}", C.DIM)
        else:
            cprint(f"[FAILED] {result.error}", C.RED)

    cprint("\n[DASHBOARD] Preview", C.MAGENTA, bold=True)
    print(json.dumps(build_dashboard_preview(results), indent=2))

    persist_artifacts(results, args.output_dir, output_type=args.output)
    cprint(f"\n[DONE] Artifacts written to: {args.output_dir}", C.GREEN, bold=True)

    if not any(r.success for r in results):
        cprint("[FAILED] No file could be processed.", C.RED, bold=True)
        raise SystemExit(1)

    cprint("[COMPLETE] Processing completed", C.GREEN, bold=True)


if __name__ == "__main__":
    main()
