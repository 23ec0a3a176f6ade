"""Append-only CSV output stream that writes its header exactly once."""

import logging
from pathlib import Path
from typing import Iterable, Sequence, Union

from corgi_cover.core.enums import StreamState
from corgi_cover.services.csv_parser import DELIMITER

logger = logging.getLogger(__name__)


def format_line(values: Iterable) -> str:
    """Render values as one comma-space delimited line."""
    return DELIMITER.join(str(value) for value in values) + "\n"


class OutputStream:
    """
    Append-only output stream backed by a file.

    The stream starts in NOT_YET_CREATED and moves to HEADER_WRITTEN once
    the file is known to carry a header, either because a previous run
    created it or because this stream wrote it. The header goes out in the
    same write as the first row, so a failed first write leaves the stream
    in NOT_YET_CREATED.

    Only one writer per path is supported.
    """

    def __init__(self, path: Union[str, Path], header: Sequence[str]):
        self.path = Path(path)
        self.header = list(header)
        self.state = StreamState.NOT_YET_CREATED

    def _has_content(self) -> bool:
        return self.path.exists() and self.path.stat().st_size > 0

    def append(self, values: Sequence) -> None:
        """
        Append one row, preceded by the header if the file is new.

        Args:
            values: Row values in header order

        Raises:
            OSError: If the file cannot be written
        """
        text = format_line(values)

        if self.state == StreamState.NOT_YET_CREATED:
            if self._has_content():
                self.state = StreamState.HEADER_WRITTEN
            else:
                text = format_line(self.header) + text

        with open(self.path, "a", encoding="utf-8") as file:
            file.write(text)

        if self.state == StreamState.NOT_YET_CREATED:
            logger.debug(f"Created output stream {self.path}")
            self.state = StreamState.HEADER_WRITTEN
