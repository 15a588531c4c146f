"""In-memory store for received error reports."""

from typing import Any


class ReportStore:
    """Keeps received payloads in arrival order."""

    def __init__(self) -> None:
        self._reports: list[dict[str, Any]] = []

    def add(self, report: dict[str, Any]) -> int:
        """Store a report and return the new count."""
        self._reports.append(report)
        return len(self._reports)

    def get_reports(self, limit: int | None = None) -> list[dict[str, Any]]:
        """Return stored reports, the most recent `limit` if given."""
        if limit is None:
            return list(self._reports)
        return self._reports[-limit:]

    def clear(self) -> None:
        self._reports.clear()

    def __len__(self) -> int:
        return len(self._reports)
