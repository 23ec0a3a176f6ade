"""Policy index reader for JSON files of existing policies."""

import logging
from pathlib import Path
from typing import Dict, List, Union

from pydantic import TypeAdapter

logger = logging.getLogger(__name__)

_POLICY_INDEX_ADAPTER = TypeAdapter(Dict[str, List[str]])


class PolicyIndexReader:
    """Utility for reading applicant policy holdings."""

    @staticmethod
    def load(path: Union[str, Path]) -> Dict[str, List[str]]:
        """
        Read a JSON object mapping applicant names to held policy names.

        Example file: {"Ethan": ["cool cats cover", "megasafe"]}

        Args:
            path: Path to the JSON file

        Returns:
            The validated policy index

        Raises:
            FileNotFoundError: If the file doesn't exist
            pydantic.ValidationError: If the content is not a name -> list mapping
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Policy index not found: {path}")

        policy_index = _POLICY_INDEX_ADAPTER.validate_json(
            path.read_text(encoding="utf-8")
        )
        logger.info(f"Loaded policies for {len(policy_index)} applicants from {path.name}")
        return policy_index
