"""
Payload Validation for the Revenue Recognition Engine

Checks the structure of a raw request payload before it is parsed.
Raises ValueError with clear messages for malformed payloads.

Field values are not validated: blank or malformed numbers become zero and
incomplete master data still produces a best-effort report.
"""

from typing import Any

DATASETS = (
    ("orders", ("orders",)),
    ("commission_rates", ("commission_rates", "rates")),
    ("spend_records", ("spend_records", "spend")),
)


class InputValidator:
    """Validates the shape of a report request payload."""

    def validate(self, data: Any) -> None:
        """
        Run all validations. Raises ValueError if any check fails.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Payload must be a JSON object, got: {type(data).__name__}")

        for name, keys in DATASETS:
            self._validate_dataset(name, self._lookup(data, keys))

    def _lookup(self, data: dict, keys: tuple[str, ...]):
        for key in keys:
            if key in data:
                return data[key]
        return None

    def _validate_dataset(self, name: str, entries: Any) -> None:
        """A dataset is optional, but when present it must be a list of objects."""
        if entries is None:
            return

        if not isinstance(entries, list):
            raise ValueError(f"{name} must be a list, got: {type(entries).__name__}")

        for i, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ValueError(f"{name}[{i}] must be an object, got: {type(entry).__name__}")
