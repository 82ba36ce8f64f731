"""Custom exceptions for the processing module."""

from typing import Any


class LabelConfigProcessingError(Exception):
    """Raised when errors are encountered while loading the label configuration."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__("Errors encountered while loading the label configuration.")
        self.errors = errors
