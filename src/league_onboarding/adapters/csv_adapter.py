from typing import Dict, List

from league_onboarding.utils.exceptions import FormatError

QUOTE_CHARS = "'\""


def _clean_cell(cell: str) -> str:
    return cell.strip().strip(QUOTE_CHARS)


class CSVAdapter:
    """
    Lenient CSV ingestion adapter.

    Responsibilities:
    - Drop blank lines
    - Read the header from the first line
    - Trim cells and strip surrounding quotes
    - Keep only rows whose width matches the header
    DOES NOT:
    - Detect delimiters (always comma)
    - Handle quoted commas
    - Report malformed rows
    """

    DELIMITER = ","

    def __init__(self, content: str):
        self.content = content

    def parse(self) -> List[Dict[str, str]]:
        lines = [line for line in self.content.split("\n") if line.strip()]

        if len(lines) < 2:
            raise FormatError(
                "CSV file must have at least a header and one data row"
            )

        header = [_clean_cell(h) for h in lines[0].split(self.DELIMITER)]
        records: List[Dict[str, str]] = []

        for line in lines[1:]:
            values = [_clean_cell(v) for v in line.split(self.DELIMITER)]
            # Width mismatch: skip silently
            if len(values) != len(header):
                continue
            records.append(dict(zip(header, values)))

        return records
