"""In-memory repository for UserProgress aggregates."""

import itertools
import threading

from learnloop.domain.common.exceptions import ConcurrencyError, EntityNotFoundError
from learnloop.domain.common.value_objects import PathId, UserId, UserProgressId
from learnloop.domain.gamification.aggregates import UserProgress, UserProgressSnapshot


class InMemoryUserProgressRepository:
    """
    Stores UserProgress as immutable snapshots.

    Every read rehydrates a fresh aggregate, so callers never share state.
    Saves are guarded by an optimistic version check: the aggregate's
    ``version`` must match the stored one, and is bumped on success.
    """

    def __init__(self) -> None:
        self._snapshots: dict[int, UserProgressSnapshot] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_by_user_and_path(self, user_id: UserId, path_id: PathId) -> UserProgress | None:
        snapshot = self._find_snapshot(user_id, path_id)
        return UserProgress.reconstitute(snapshot) if snapshot else None

    def find_by_id(self, progress_id: UserProgressId) -> UserProgress | None:
        snapshot = self._snapshots.get(int(progress_id))
        return UserProgress.reconstitute(snapshot) if snapshot else None

    def save(self, progress: UserProgress) -> UserProgress:
        """
        Save progress, assigning an ID to new aggregates.

        Raises:
            ConcurrencyError: If another writer saved first
            EntityNotFoundError: If the progress was deleted meanwhile
        """
        with self._lock:
            if progress.is_new:
                existing = self._find_snapshot(progress.user_id, progress.path_id)
                if existing is not None:
                    raise ConcurrencyError("UserProgress", progress.version, existing.version)
                progress.id = UserProgressId(next(self._ids))
            else:
                stored = self._snapshots.get(int(progress.id))
                if stored is None:
                    raise EntityNotFoundError("UserProgress", progress.id.value)
                if stored.version != progress.version:
                    raise ConcurrencyError("UserProgress", progress.version, stored.version)

            progress.version += 1
            self._snapshots[int(progress.id)] = progress.to_snapshot()
        return progress

    def delete(self, progress_id: UserProgressId) -> bool:
        with self._lock:
            return self._snapshots.pop(int(progress_id), None) is not None

    def _find_snapshot(self, user_id: UserId, path_id: PathId) -> UserProgressSnapshot | None:
        for snapshot in self._snapshots.values():
            if snapshot.user_id == user_id.value and snapshot.path_id == path_id.value:
                return snapshot
        return None
