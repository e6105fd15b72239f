from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from league_onboarding.canonical.schema import ArrayNode, ObjectNode, SchemaNode


@dataclass(frozen=True)
class ProcessingResult:
    """
    Outcome of processing one uploaded file.
    Created once per file and never mutated.
    """
    file_id: str
    file_name: str
    success: bool

    schema: Optional[SchemaNode] = None
    records: List[Any] = field(default_factory=list)
    preview: List[Any] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def field_count(self) -> int:
        """
        Number of fields described by the record node.
        """
        node = self.schema
        if isinstance(node, ArrayNode):
            node = node.items
        if isinstance(node, ObjectNode):
            return len(node.properties)
        return 0

    def to_dict(self, include_records: bool = True) -> Dict[str, Any]:
        if not self.success:
            return {
                "fileId": self.file_id,
                "fileName": self.file_name,
                "success": False,
                "error": self.error,
            }

        payload = {
            "fileId": self.file_id,
            "fileName": self.file_name,
            "success": True,
            "schema": self.schema.to_dict() if self.schema else None,
            "preview": self.preview,
            "suggestions": self.suggestions,
            "recordCount": self.record_count,
            "fieldCount": self.field_count,
        }
        if include_records:
            payload["extractedData"] = self.records
        return payload
