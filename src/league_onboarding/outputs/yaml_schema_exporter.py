import yaml

from league_onboarding.canonical.schema import SchemaNode


class YAMLSchemaExporter:
    """
    Exports an inferred schema into YAML format.
    """

    def __init__(self, schema: SchemaNode):
        """
        :param schema: Root node of an inferred schema
        """
        self.schema = schema

    def export_to_string(self) -> str:
        """
        Export schema as YAML string
        """
        return yaml.safe_dump(
            self.schema.to_dict(),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )

    def export_to_file(self, file_path: str):
        """
        Export schema to YAML file
        """
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(self.export_to_string())
