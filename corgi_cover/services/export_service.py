"""Export service serializing the accepted stream as JSON."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from corgi_cover.config import settings
from corgi_cover.core.errors import ExportSourceMissingError, MalformedRowError
from corgi_cover.services.csv_parser import DELIMITER

logger = logging.getLogger(__name__)


class ExportService:
    """
    Export service for handing accepted applications to downstream consumers.

    Values are exported as text exactly as they appear in the stream. With
    legacy spacing preserved, every key and value after the first keeps the
    leading space of the ", " delimiter (" state": " IL"). Fields are always
    split on the full delimiter, so a bare "," inside a name stays put.
    """

    def __init__(self, preserve_legacy_spacing: Optional[bool] = None):
        if preserve_legacy_spacing is None:
            preserve_legacy_spacing = settings.PRESERVE_LEGACY_SPACING
        self.preserve_legacy_spacing = preserve_legacy_spacing

    def split_line(self, line: str) -> List[str]:
        """Split one stream line into its fields."""
        fields = line.split(DELIMITER)
        if self.preserve_legacy_spacing:
            fields = fields[:1] + [" " + value for value in fields[1:]]
        return fields

    def read_records(self, accepted_path: Union[str, Path]) -> List[Dict[str, str]]:
        """
        Read the accepted stream back as records keyed by its header tokens.

        Raises:
            ExportSourceMissingError: If the stream does not exist
            MalformedRowError: If a row does not match the header
        """
        accepted_path = Path(accepted_path)
        if not accepted_path.exists():
            raise ExportSourceMissingError(
                f"Accepted applications not found: {accepted_path}",
                details={"path": str(accepted_path)},
            )

        with open(accepted_path, encoding="utf-8") as file:
            lines = [
                (line_number, line.rstrip("\r\n"))
                for line_number, line in enumerate(file, start=1)
                if line.strip()
            ]
        if not lines:
            return []

        header = self.split_line(lines[0][1])
        records = []
        for line_number, line in lines[1:]:
            values = self.split_line(line)
            if len(values) != len(header):
                raise MalformedRowError(
                    f"Expected {len(header)} fields, found {len(values)}",
                    line_number=line_number,
                    details={"path": str(accepted_path), "line": line},
                )
            records.append(dict(zip(header, values)))
        return records

    def export_eligible_as_json(
        self,
        accepted_path: Union[str, Path],
        json_output_path: Union[str, Path],
    ) -> int:
        """
        Serialize the accepted stream as a JSON array of objects.

        Args:
            accepted_path: Accepted-output CSV written by the partition service
            json_output_path: Destination of the JSON export (overwritten)

        Returns:
            Number of exported records

        Raises:
            ExportSourceMissingError: If the accepted stream does not exist
        """
        records = self.read_records(accepted_path)

        with open(json_output_path, "w", encoding="utf-8") as file:
            json.dump(records, file, indent=2)

        logger.info(f"Exported {len(records)} eligible applications to {json_output_path}")
        return len(records)
