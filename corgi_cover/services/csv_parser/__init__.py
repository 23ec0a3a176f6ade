"""Readers for application tables and policy indexes."""

from .application_reader import DELIMITER, ApplicationReader
from .policy_reader import PolicyIndexReader

__all__ = ["DELIMITER", "ApplicationReader", "PolicyIndexReader"]
