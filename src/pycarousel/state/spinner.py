"""Master spinner tracker.

Aggregates the asynchronous load outcomes of independently loading
resources (typically slide images) into a single "everything settled"
signal.  The tracker never starts or times out loads; it only records
outcomes reported by the rendering layer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from pycarousel.models.spinner import SpinnerRecord

_logger = logging.getLogger(__name__)


class MasterSpinnerTracker:
    """Per-resource load records keyed by an opaque resource key."""

    def __init__(self) -> None:
        self._records: dict[str, SpinnerRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._records))

    def get(self, key: str) -> SpinnerRecord | None:
        return self._records.get(key)

    def snapshot(self) -> dict[str, SpinnerRecord]:
        """Return a copy of the tracked records (records are immutable)."""
        return dict(self._records)

    def subscribe(self, key: str) -> None:
        """Start tracking *key* as pending; existing records are left alone."""
        if key not in self._records:
            self._records[key] = SpinnerRecord.pending()

    def report_success(self, key: str) -> None:
        self._settle(key, SpinnerRecord.succeeded())

    def report_error(self, key: str) -> None:
        self._settle(key, SpinnerRecord.failed())

    def _settle(self, key: str, outcome: SpinnerRecord) -> None:
        record = self._records.get(key)
        if record is None:
            _logger.debug("spinner report ignored for untracked key %s", key)
            return
        if record.complete:
            # Settlement is terminal; the first outcome wins.
            _logger.debug("spinner report ignored for already settled key %s", key)
            return
        self._records[key] = outcome

    def unsubscribe(self, key: str) -> bool:
        """Stop tracking *key*.

        Returns ``True`` if a record was removed, ``False`` if *key* was
        not tracked.
        """
        return self._records.pop(key, None) is not None

    def unsubscribe_all(self) -> None:
        self._records.clear()

    def is_finished(self) -> bool:
        """Return ``True`` when every tracked record has settled.

        An empty tracker is finished.
        """
        return all(record.complete for record in self._records.values())
