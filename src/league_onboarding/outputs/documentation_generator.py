from typing import Dict, List, Optional, Sequence
from datetime import datetime, timezone

from league_onboarding.canonical.result import ProcessingResult
from league_onboarding.canonical.schema import ArrayNode, ObjectNode, SchemaNode
from league_onboarding.outputs.dashboard_stats import build_dashboard_preview


class DocumentationGenerator:
    """
    Markdown report for an onboarding run.

    Includes:
    - League header (optional)
    - Dashboard summary & recommendations
    - One data dictionary per processed file
    - Errors for files that failed
    """

    def __init__(
        self,
        results: Sequence[ProcessingResult],
        league: Optional[Dict] = None,
    ):
        self.results = list(results)
        self.league = league or {}

    # ======================================================
    # PUBLIC ENTRYPOINT
    # ======================================================

    def generate_markdown(self) -> str:
        lines: List[str] = []

        title = self.league.get("name") or "Data Onboarding Report"
        lines.append(f"# {title}")
        lines.append("")

        self._render_league(lines)
        self._render_summary(lines)

        for result in self.results:
            self._render_file(lines, result)

        self._render_footer(lines)
        return "\n".join(lines)

    # ======================================================
    # LEAGUE
    # ======================================================

    def _render_league(self, lines: List[str]):
        if not self.league:
            return

        lines.append("## League")
        lines.append("")
        lines.append(f"- **Sport**: {self.league.get('sport', 'N/A')}")
        lines.append(f"- **Tier**: {self.league.get('tier', 'N/A')}")
        lines.append(f"- **Contact**: {self.league.get('contactName', 'N/A')}")
        lines.append("")
        lines.append("---")
        lines.append("")

    # ======================================================
    # SUMMARY
    # ======================================================

    def _render_summary(self, lines: List[str]):
        preview = build_dashboard_preview(self.results)
        stats = preview["stats"]

        lines.append("## Summary")
        lines.append("")
        lines.append(f"- **Files**: {stats['total_files']}")
        lines.append(f"- **Records**: {stats['total_records']}")
        lines.append(f"- **Fields**: {stats['total_fields']}")
        lines.append(f"- **Data Quality**: {stats['data_quality']}%")
        lines.append(f"- **Complexity**: {stats['complexity']}%")
        lines.append(f"- **Integration Readiness**: {stats['integration_readiness']}%")
        lines.append("")

        if preview["data_types"]:
            lines.append("### Data Types")
            lines.append("")
            for type_name, count in preview["data_types"].items():
                lines.append(f"- {type_name}: {count}")
            lines.append("")

        lines.append("### Recommendations")
        lines.append("")
        for recommendation in preview["recommendations"]:
            lines.append(f"- {recommendation}")
        lines.append("")
        lines.append("---")
        lines.append("")

    # ======================================================
    # PER FILE
    # ======================================================

    def _render_file(self, lines: List[str], result: ProcessingResult):
        lines.append(f"## {result.file_name}")
        lines.append("")

        if not result.success:
            lines.append(f"**Failed**: {result.error}")
            lines.append("")
            return

        lines.append(f"- **Records**: {result.record_count}")
        lines.append(f"- **Fields**: {result.field_count}")
        lines.append("")
        lines.append("| Field | Type | Example |")
        lines.append("|-------|------|---------|")
        self._render_node(lines, result.schema)
        lines.append("")

        if result.suggestions:
            lines.append("### Suggestions")
            lines.append("")
            for suggestion in result.suggestions:
                lines.append(f"- {suggestion}")
            lines.append("")

    def _render_node(
        self,
        lines: List[str],
        node: SchemaNode,
        parent: Optional[str] = None,
    ):
        if isinstance(node, ArrayNode):
            self._render_node(lines, node.items, parent=parent)
            return

        if isinstance(node, ObjectNode):
            for key, child in node.properties.items():
                name = f"{parent}.{key}" if parent else key
                if isinstance(child, (ObjectNode, ArrayNode)):
                    lines.append(f"| {name} | {child.type.value} | |")
                    self._render_node(lines, child, parent=name)
                else:
                    example = "" if child.example is None else str(child.example)
                    example = example.replace("|", "\\|")
                    lines.append(f"| {name} | {child.type.value} | {example} |")

    # ======================================================
    # FOOTER
    # ======================================================

    def _render_footer(self, lines: List[str]):
        lines.append("---")
        lines.append("")
        lines.append(
            f"_Generated At (UTC): "
            f"{datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')}_"
        )
