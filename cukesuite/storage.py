"""Thread-safe in-memory store shared by scenario runners and formatters.

Records are plain objects accessed by attribute:

* features have ``uri``;
* pickles have ``id``, ``uri`` and ``steps``, and each step has ``id``;
* pickle results have ``pickle_id``;
* pickle step results have ``pickle_id``, ``pickle_step_id`` and ``status``.

Inserting a record whose key is already stored replaces the earlier one.
Lookups that find nothing raise :class:`RecordNotFound`. Listings come back
sorted by their index key, as an ordered index would return them.
"""

from __future__ import annotations

import threading
from typing import Any

_TABLE_FEATURE = "feature"
_TABLE_PICKLE = "pickle"
_TABLE_PICKLE_STEP = "pickle_step"
_TABLE_PICKLE_RESULT = "pickle_result"
_TABLE_PICKLE_STEP_RESULT = "pickle_step_result"
_TABLE_STEP_DEFINITION_MATCH = "step_defintion_match"

_INDEX_ID = "id"
_INDEX_URI = "uri"
_INDEX_PICKLE_ID = "pickle_id"
_INDEX_STATUS = "status"


class RecordNotFound(LookupError):
    """Raised when no record is stored under the requested key."""

    def __init__(self, table: str, index: str, *args: Any):
        super().__init__(
            f'couldn\'t find index: "{index}" in table: "{table}" with args: {list(args)}'
        )
        self.table = table
        self.index = index
        self.args_used = args


def _key(table: str, value: Any) -> str:
    if not isinstance(value, str) or value == "":
        raise ValueError(f'object missing primary index for table "{table}"')
    return value


class Storage:
    """In-memory storage of features, pickles, results and step matches."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._features: dict[str, Any] = {}
        self._pickles: dict[str, Any] = {}
        self._pickle_steps: dict[str, Any] = {}
        self._pickle_results: dict[str, Any] = {}
        self._step_results: dict[str, Any] = {}
        self._matches: dict[str, Any] = {}
        self._test_run_started: Any = None

    def insert_pickle(self, pickle: Any) -> None:
        """Store a pickle together with all of its steps."""
        pickle_id = _key(_TABLE_PICKLE, pickle.id)
        step_ids = [(_key(_TABLE_PICKLE_STEP, step.id), step) for step in pickle.steps]
        with self._lock:
            self._pickles[pickle_id] = pickle
            self._pickle_steps.update(step_ids)

    def get_pickle(self, pickle_id: str) -> Any:
        """Return the pickle with the given id."""
        return self._first(self._pickles, _TABLE_PICKLE, _INDEX_ID, pickle_id)

    def get_pickles(self, uri: str) -> list[Any]:
        """Return the pickles of the feature at ``uri``, ordered by id."""
        with self._lock:
            found = [p for p in self._pickles.values() if p.uri == uri]
        return sorted(found, key=lambda p: p.id)

    def get_pickle_step(self, step_id: str) -> Any:
        """Return the pickle step with the given id."""
        return self._first(self._pickle_steps, _TABLE_PICKLE_STEP, _INDEX_ID, step_id)

    def insert_test_run_started(self, started: Any) -> None:
        """Record the test-run-started event."""
        with self._lock:
            self._test_run_started = started

    def get_test_run_started(self) -> Any:
        """Return the recorded test-run-started event, or None if unset."""
        with self._lock:
            return self._test_run_started

    def insert_pickle_result(self, result: Any) -> None:
        """Store a pickle result keyed by its pickle id."""
        key = _key(_TABLE_PICKLE_RESULT, result.pickle_id)
        with self._lock:
            self._pickle_results[key] = result

    def insert_pickle_step_result(self, result: Any) -> None:
        """Store a pickle step result keyed by its step id."""
        key = _key(_TABLE_PICKLE_STEP_RESULT, result.pickle_step_id)
        with self._lock:
            self._step_results[key] = result

    def get_pickle_result(self, pickle_id: str) -> Any:
        """Return the result of the pickle with the given id."""
        return self._first(
            self._pickle_results, _TABLE_PICKLE_RESULT, _INDEX_ID, pickle_id
        )

    def get_pickle_results(self) -> list[Any]:
        """Return every pickle result, ordered by pickle id."""
        with self._lock:
            return [self._pickle_results[k] for k in sorted(self._pickle_results)]

    def get_pickle_step_result(self, step_id: str) -> Any:
        """Return the result of the pickle step with the given id."""
        return self._first(
            self._step_results, _TABLE_PICKLE_STEP_RESULT, _INDEX_ID, step_id
        )

    def get_pickle_step_results_by_pickle_id(self, pickle_id: str) -> list[Any]:
        """Return the step results of one pickle, ordered by step id."""
        with self._lock:
            return [
                self._step_results[k]
                for k in sorted(self._step_results)
                if self._step_results[k].pickle_id == pickle_id
            ]

    def get_pickle_step_results_by_status(self, status: Any) -> list[Any]:
        """Return the step results with the given status, ordered by step id."""
        with self._lock:
            return [
                self._step_results[k]
                for k in sorted(self._step_results)
                if self._step_results[k].status == status
            ]

    def insert_feature(self, feature: Any) -> None:
        """Store a feature keyed by its URI."""
        key = _key(_TABLE_FEATURE, feature.uri)
        with self._lock:
            self._features[key] = feature

    def get_feature(self, uri: str) -> Any:
        """Return the feature stored under ``uri``."""
        return self._first(self._features, _TABLE_FEATURE, _INDEX_ID, uri)

    def get_features(self) -> list[Any]:
        """Return every feature, ordered by URI."""
        with self._lock:
            return [self._features[k] for k in sorted(self._features)]

    def insert_step_definition_match(self, step_id: str, match: Any) -> None:
        """Record which step definition (possibly None) matched a step."""
        key = _key(_TABLE_STEP_DEFINITION_MATCH, step_id)
        with self._lock:
            self._matches[key] = match

    def get_step_definition_match(self, step_id: str) -> Any:
        """Return the step definition recorded for the step id."""
        return self._first(
            self._matches, _TABLE_STEP_DEFINITION_MATCH, _INDEX_ID, step_id
        )

    def _first(self, records: dict[str, Any], table: str, index: str, key: str) -> Any:
        with self._lock:
            try:
                return records[key]
            except KeyError:
                raise RecordNotFound(table, index, key) from None