import json
from typing import Dict

from league_onboarding.canonical.schema import SchemaNode


class SchemaJSONExporter:
    """
    Exports an inferred schema to JSON format.
    """

    def __init__(self, schema: SchemaNode):
        self.schema = schema

    def export(self) -> Dict:
        """
        Return schema as JSON-serializable object.
        """
        return self.schema.to_dict()

    def export_to_string(self, indent: int = 2) -> str:
        """
        Export schema as formatted JSON string.
        """
        return json.dumps(self.export(), indent=indent, default=str)

    def export_to_file(self, file_path: str, indent: int = 2):
        """
        Write schema to a JSON file.
        """
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self.export(), f, indent=indent, default=str)
