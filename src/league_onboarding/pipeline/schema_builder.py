import os
from typing import Any, Dict, List, Mapping, Sequence

from league_onboarding.canonical.schema import ArrayNode, LeafNode, ObjectNode, SchemaNode
from league_onboarding.inference.type_inference import classify_column


def schema_name_from_file(file_name: str) -> str:
    """
    Default schema name: the file name without its extension.
    """
    base = os.path.basename(file_name or "")
    return os.path.splitext(base)[0]


def _first_non_null(values: List[Any]) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def build_schema(records: Sequence[Any], name: str = "") -> ArrayNode:
    """
    Build an array-of-records schema from parsed records.

    Only the first record decides which fields exist; later records
    contribute values to type inference but never add fields.
    """
    if not records:
        return ArrayNode(name=name, items=ObjectNode(name="item"))

    sample = records[0]
    field_names = list(sample.keys()) if isinstance(sample, Mapping) else []

    properties: Dict[str, SchemaNode] = {}
    for key in field_names:
        values = [
            record.get(key)
            for record in records
            if isinstance(record, Mapping)
        ]
        properties[key] = LeafNode(
            name=key,
            type=classify_column(values),
            example=_first_non_null(values),
            description=f"Field: {key}",
        )

    record_node = ObjectNode(
        name="record",
        properties=properties,
        required=tuple(properties.keys()),
    )

    return ArrayNode(name=name, items=record_node)
