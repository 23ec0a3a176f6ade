"""Application table reader for comma-space delimited CSV files."""

import logging
import re
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from corgi_cover.core.errors import MalformedRowError
from corgi_cover.models.domain.application import Application
from corgi_cover.models.schemas.application import ApplicationRow

logger = logging.getLogger(__name__)

DELIMITER = ", "

# Columns that are always text, even when the token looks like an integer
TEXT_FIELDS = frozenset({"name", "state"})

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


class ApplicationReader:
    """Utility for converting application tables into Application records."""

    @staticmethod
    def parse_value(token: str) -> Union[int, str]:
        """
        Coerce a single token.

        Args:
            token: Raw field text

        Returns:
            An int for integer-looking tokens, otherwise the token text
        """
        if _INTEGER_PATTERN.fullmatch(token):
            return int(token)
        return token

    @classmethod
    def parse_row(
        cls, header: List[str], line: str, line_number: int
    ) -> Dict[str, Union[int, str]]:
        """
        Zip a value row with the header tokens.

        Text columns (name, state) keep their token verbatim; every other
        column is coerced with parse_value.

        Raises:
            MalformedRowError: If the row does not have one value per header field
        """
        values = line.split(DELIMITER)
        if len(values) != len(header):
            raise MalformedRowError(
                f"Expected {len(header)} fields, found {len(values)}",
                line_number=line_number,
                details={"line": line},
            )
        return {
            key: value if key in TEXT_FIELDS else cls.parse_value(value)
            for key, value in zip(header, values)
        }

    @classmethod
    def parse_lines(cls, lines: Iterable[str]) -> List[Application]:
        """
        Parse header and value lines into applications.

        Args:
            lines: Table lines, header first (line endings are stripped)

        Returns:
            Applications in row order (empty if the table has no rows)

        Raises:
            MalformedRowError: If any row is malformed; nothing is returned
        """
        header: Optional[List[str]] = None
        applications: List[Application] = []

        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r\n")
            if not line.strip():
                continue

            if header is None:
                header = line.split(DELIMITER)
                continue

            row = cls.parse_row(header, line, line_number)
            try:
                application = ApplicationRow.model_validate(row).to_domain()
            except ValidationError as e:
                raise MalformedRowError(
                    f"Invalid application fields: {e.errors(include_url=False)}",
                    line_number=line_number,
                    details={"line": line},
                ) from e
            applications.append(application)

        return applications

    @classmethod
    def load(
        cls,
        source: Union[str, Path],
        on_record: Optional[Callable[[Application], None]] = None,
    ) -> Optional[List[Application]]:
        """
        Open an application CSV and convert it to Application records.

        Args:
            source: Path to the CSV file
            on_record: Optional sink called once per parsed application

        Returns:
            Parsed applications, or None if the file does not exist

        Raises:
            MalformedRowError: If the file contains a malformed row
        """
        source = Path(source)

        if not source.is_file():
            logger.warning(f"Unable to load/find file: {source}")
            return None

        with open(source, encoding="utf-8") as file:
            applications = cls.parse_lines(file)

        logger.info(f"Loaded {len(applications)} applications from {source.name}")

        if on_record is not None:
            for application in applications:
                on_record(application)

        return applications
