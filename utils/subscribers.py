"""
Subscribers Module - Durable (email, projectId) subscriptions

The whole collection lives in a single JSON file that is read fully on every
call and rewritten fully on every change.
"""

import json
import logging
import os
import tempfile
import threading
from dataclasses import dataclass
from datetime import datetime, timezone

from .errors import ValidationError


@dataclass(frozen=True)
class Subscription:
    email: str
    project_id: str
    created_at: str

    def to_dict(self):
        return {
            'email': self.email,
            'projectId': self.project_id,
            'createdAt': self.created_at
        }

    @classmethod
    def from_dict(cls, data):
        """Build from a stored record, or None if the record is malformed"""
        if not isinstance(data, dict):
            return None
        email = data.get('email')
        project_id = data.get('projectId')
        if not isinstance(email, str) or not isinstance(project_id, str):
            return None
        if not email or not project_id:
            return None
        return cls(email=email, project_id=project_id, created_at=str(data.get('createdAt') or ''))

    def matches(self, email, project_id):
        return self.email == email and self.project_id == project_id


def _utc_timestamp():
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


def _require_text(value, field):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{field} is required')
    return value.strip()


class SubscriberStore:
    """
    Append-only, deduplicated subscription store backed by one JSON file

    Writers inside one process are serialized by a lock around the
    load/mutate/save unit. Separate processes sharing the same file are not
    coordinated and can still overwrite each other's additions.
    """

    def __init__(self, path, logger=None):
        self.path = path
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()

    def load(self):
        """
        Read every stored subscription

        Returns:
            list: Subscription entries in file order. A missing, unreadable or
            corrupt file yields an empty list.
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            self.logger.warning(f"Subscriber file {self.path} unreadable, starting empty: {str(e)}")
            return []

        if not isinstance(raw, list):
            self.logger.warning(f"Subscriber file {self.path} is not a list, starting empty")
            return []

        subscriptions = []
        for item in raw:
            entry = Subscription.from_dict(item)
            if entry is None:
                self.logger.warning(f"Skipping malformed subscriber record: {item!r}")
                continue
            subscriptions.append(entry)
        return subscriptions

    def save(self, subscriptions):
        """Overwrite the backing file with the given subscriptions"""
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(prefix='.subscribers-', suffix='.json', dir=directory)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump([s.to_dict() for s in subscriptions], f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def add(self, email, project_id):
        """
        Subscribe an email to a project

        Args:
            email (str): Visitor address, treated as an opaque identifier
            project_id (str): Project identifier from the catalog

        Returns:
            bool: True if a new subscription was written, False if the pair
            was already subscribed
        """
        email = _require_text(email, 'email')
        project_id = _require_text(project_id, 'projectId')

        with self._lock:
            subscriptions = self.load()
            if any(s.matches(email, project_id) for s in subscriptions):
                return False

            entry = Subscription(email=email, project_id=project_id, created_at=_utc_timestamp())
            subscriptions.append(entry)
            self.save(subscriptions)

        self.logger.info(f"New subscription: {entry.to_dict()}")
        return True

    def find_by_project(self, project_id):
        """All subscriptions for a project, in store order"""
        if isinstance(project_id, str):
            project_id = project_id.strip()
        return [s for s in self.load() if s.project_id == project_id]


__all__ = ['Subscription', 'SubscriberStore']
