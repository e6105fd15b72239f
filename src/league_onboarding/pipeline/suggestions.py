from typing import List, Sequence

from league_onboarding.canonical.schema import ArrayNode, ObjectNode, SchemaNode
from league_onboarding.standards.limits import LARGE_DATASET_RECORDS, MANY_FIELDS

LARGE_DATASET = "Large dataset detected — consider pagination."
MANY_FIELDS_DETECTED = "Many fields detected — consider normalization."
MISSING_IDENTIFIER = "Consider adding a unique identifier field."
LOOKS_GOOD = "Data structure looks good for integration."


def _record_fields(schema: SchemaNode) -> List[str]:
    node = schema.items if isinstance(schema, ArrayNode) else schema
    if isinstance(node, ObjectNode):
        return list(node.properties.keys())
    return []


def generate_suggestions(schema: SchemaNode, records: Sequence) -> List[str]:
    """
    Advisory notes for a processed file, in a fixed order.
    Field checks are skipped when the schema describes no fields.
    """
    suggestions: List[str] = []

    if len(records) > LARGE_DATASET_RECORDS:
        suggestions.append(LARGE_DATASET)

    fields = _record_fields(schema)
    if fields:
        if len(fields) > MANY_FIELDS:
            suggestions.append(MANY_FIELDS_DETECTED)

        if not any("id" in str(name).lower() for name in fields):
            suggestions.append(MISSING_IDENTIFIER)

    suggestions.append(LOOKS_GOOD)
    return suggestions
