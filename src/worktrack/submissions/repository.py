from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import List, Optional, Protocol, Sequence

from ..core.constants import SUBMISSIONS_KEY
from ..storage.base import KeyValueStorage, read_json, write_json
from .model import Submission


class SubmissionRepository(Protocol):
    def list_all(self) -> Sequence[Submission]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: str, work_date: date) -> Optional[Submission]:
        raise NotImplementedError

    def upsert(self, submission: Submission) -> Submission:
        """Insert, or replace the record with the same (user_id, work_date).

        A replaced record keeps its id. Returns the stored submission.
        """

        raise NotImplementedError


class StorageSubmissionRepository(SubmissionRepository):
    """Submissions kept as a JSON list under one storage key.

    Read, modify and write back as a whole; valid for a single writer only.
    """

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def _load(self) -> List[Submission]:
        return [Submission.from_dict(item) for item in read_json(self._storage, SUBMISSIONS_KEY, [])]

    def _save(self, submissions: Sequence[Submission]) -> None:
        write_json(self._storage, SUBMISSIONS_KEY, [s.to_dict() for s in submissions])

    def list_all(self) -> Sequence[Submission]:
        return self._load()

    def get_for_user_and_date(self, user_id: str, work_date: date) -> Optional[Submission]:
        return next(
            (s for s in self._load() if s.user_id == str(user_id) and s.work_date == work_date),
            None,
        )

    def upsert(self, submission: Submission) -> Submission:
        submissions = self._load()
        for i, existing in enumerate(submissions):
            if existing.user_id == submission.user_id and existing.work_date == submission.work_date:
                stored = replace(submission, submission_id=existing.submission_id)
                submissions[i] = stored
                break
        else:
            stored = submission
            submissions.append(stored)

        self._save(submissions)
        return stored
