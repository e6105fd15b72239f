import math
from typing import Dict, List, Optional, Sequence

from league_onboarding.canonical.result import ProcessingResult
from league_onboarding.canonical.schema import ArrayNode, ObjectNode, SchemaNode
from league_onboarding.standards.limits import (
    HIGH_COMPLEXITY,
    LARGE_DASHBOARD_RECORDS,
    LOW_DATA_QUALITY,
)


def _round(value: float) -> int:
    # Half-up, the way the dashboard rounds percentages
    return int(math.floor(value + 0.5))


def count_schema_fields(node: SchemaNode) -> int:
    """
    Recursive field count.

    An object counts one per property plus whatever each property
    contains; an array counts only its item; a leaf counts one.
    """
    if isinstance(node, ObjectNode):
        return len(node.properties) + sum(
            count_schema_fields(child) for child in node.properties.values()
        )
    if isinstance(node, ArrayNode):
        return count_schema_fields(node.items)
    return 1


def type_distribution(schemas: Sequence[SchemaNode]) -> Dict[str, int]:
    """
    Tally the declared type of every property reachable from the schemas.
    Root nodes and array items are walked but not tallied.
    """
    distribution: Dict[str, int] = {}

    def collect(node: SchemaNode):
        if isinstance(node, ObjectNode):
            for child in node.properties.values():
                key = child.type.value
                distribution[key] = distribution.get(key, 0) + 1
                collect(child)
        elif isinstance(node, ArrayNode):
            collect(node.items)

    for schema in schemas:
        collect(schema)

    return distribution


def data_quality(results: Sequence[ProcessingResult]) -> int:
    if not results:
        return 0
    succeeded = sum(1 for r in results if r.success)
    return _round(succeeded / len(results) * 100)


def complexity(field_count: int, schema_count: int) -> int:
    return min(100, _round(field_count / 10 * 20 + schema_count * 15))


def integration_readiness(quality: int, complexity_score: int) -> int:
    return _round((quality + (100 - complexity_score / 2)) / 2)


def build_dashboard_stats(
    schemas: Sequence[SchemaNode],
    results: Sequence[ProcessingResult],
    total_files: Optional[int] = None,
) -> Dict[str, int]:
    """
    Summary numbers for the dashboard preview.
    """
    total_fields = sum(count_schema_fields(s) for s in schemas)
    quality = data_quality(results)
    complexity_score = complexity(total_fields, len(schemas))

    return {
        "total_files": len(results) if total_files is None else total_files,
        "total_records": sum(r.record_count for r in results),
        "total_fields": total_fields,
        "data_quality": quality,
        "complexity": complexity_score,
        "integration_readiness": integration_readiness(quality, complexity_score),
    }


def generate_recommendations(
    stats: Dict[str, int], schemas: Sequence[SchemaNode]
) -> List[str]:
    recommendations: List[str] = []

    if stats["data_quality"] < LOW_DATA_QUALITY:
        recommendations.append(
            "Consider improving data quality by validating field formats"
        )

    if stats["complexity"] > HIGH_COMPLEXITY:
        recommendations.append(
            "Complex data structure detected - consider data normalization"
        )

    if stats["total_records"] > LARGE_DASHBOARD_RECORDS:
        recommendations.append(
            "Large dataset - implement pagination for better performance"
        )

    if not any("player" in s.name.lower() for s in schemas):
        recommendations.append(
            "Consider adding player/participant data for comprehensive analytics"
        )

    recommendations.append("Data structure is compatible with our analytics platform")
    return recommendations


def build_dashboard_preview(
    results: Sequence[ProcessingResult], total_files: Optional[int] = None
) -> Dict:
    """
    Stats, type distribution and recommendations for a set of results.
    Schemas come from the successful results, in result order.
    """
    schemas = [r.schema for r in results if r.success and r.schema is not None]
    stats = build_dashboard_stats(schemas, results, total_files=total_files)

    return {
        "stats": stats,
        "data_types": type_distribution(schemas),
        "recommendations": generate_recommendations(stats, schemas),
    }
