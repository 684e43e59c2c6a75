"""Queries on users' wishes."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime

from .dbbase import QueriesBase
from .models import Wish

_CREATE_WISH = """
INSERT INTO wish (
    chat_id,
    product_id,
    status
) VALUES (
    :chat_id, :product_id, :status
) RETURNING id, chat_id, created_at, product_id, status
"""

_DELETE_WISH = """
DELETE FROM wish
WHERE chat_id = :chat_id AND id = :id
"""

_GET_WISH = """
SELECT id, chat_id, created_at, product_id, status FROM wish
WHERE chat_id = :chat_id AND id = :id
"""

_GET_WISH_BY_ID = """
SELECT id, chat_id, created_at, product_id, status FROM wish
WHERE id = :id
"""

_GET_WISHES_FOR_USER = """
SELECT
    w.chat_id AS chat_id,
    w.product_id AS product_id,
    d.status_name AS status_name,
    w.id AS id,
    w.created_at AS created_at,
    u.username AS username
FROM wish w
JOIN users u ON w.chat_id = u.chat_id
JOIN dim_wish_status d ON w.status = d.id
WHERE w.chat_id = :chat_id
"""

_GET_WISHES_PUBLIC = """
SELECT
    w.product_id AS product_id,
    w.id AS id,
    d.status_name AS status_name,
    w.created_at AS created_at,
    u.username AS username
FROM wish w
JOIN users u ON w.chat_id = u.chat_id
JOIN dim_wish_status d ON w.status = d.id
WHERE w.chat_id = :owner_id
  AND (
      w.status = 1
      OR (
          EXISTS (
              SELECT 1
              FROM friends f
              WHERE (
                  (f.chat_id = :viewer_id AND f.friend_id = w.chat_id)
                  OR (f.chat_id = w.chat_id AND f.friend_id = :viewer_id)
              )
              AND f.status = 1
          )
      )
  )
"""

_UPDATE_WISH_STATUS = """
UPDATE wish
SET
status = :status
WHERE chat_id = :chat_id AND id = :id
RETURNING id, chat_id, created_at, product_id, status
"""


@dataclass(frozen=True)
class UserWish:
    """One of a user's own wishes with its status name and owner."""

    chat_id: int
    product_id: uuid.UUID
    status_name: str
    id: int
    created_at: datetime
    username: str


@dataclass(frozen=True)
class PublicWish:
    """A wish another user is allowed to see."""

    product_id: uuid.UUID
    id: int
    status_name: str
    created_at: datetime
    username: str


class WishQueries(QueriesBase):
    """Statements on the wish table."""

    def _wish(self, row) -> Wish:
        return Wish(
            id=int(row["id"]),
            chat_id=int(row["chat_id"]),
            created_at=self._timestamp(row["created_at"]),
            product_id=self._uuid(row["product_id"]),
            status=int(row["status"]),
        )

    def create_wish(self, chat_id: int, product_id: uuid.UUID, status: int) -> Wish:
        """Add a product to a user's wishes."""
        return self._wish(
            self._fetch_one(_CREATE_WISH, chat_id=chat_id, product_id=product_id, status=status)
        )

    def delete_wish(self, chat_id: int, wish_id: int) -> None:
        """Remove one of the user's wishes."""
        self._execute(_DELETE_WISH, chat_id=chat_id, id=wish_id)

    def get_wish(self, chat_id: int, wish_id: int) -> Wish:
        """The user's wish with the given id."""
        return self._wish(self._fetch_one(_GET_WISH, chat_id=chat_id, id=wish_id))

    def get_wish_by_id(self, wish_id: int) -> Wish:
        """The wish with the given id, whoever owns it."""
        return self._wish(self._fetch_one(_GET_WISH_BY_ID, id=wish_id))

    def get_wishes_for_user(self, chat_id: int) -> list[UserWish]:
        """All of the user's wishes."""
        return [
            UserWish(
                chat_id=int(row["chat_id"]),
                product_id=self._uuid(row["product_id"]),
                status_name=row["status_name"],
                id=int(row["id"]),
                created_at=self._timestamp(row["created_at"]),
                username=row["username"],
            )
            for row in self._fetch_all(_GET_WISHES_FOR_USER, chat_id=chat_id)
        ]

    def get_wishes_public(self, owner_id: int, viewer_id: int) -> list[PublicWish]:
        """The owner's wishes the viewer may see: public ones, or all if they are friends."""
        return [
            PublicWish(
                product_id=self._uuid(row["product_id"]),
                id=int(row["id"]),
                status_name=row["status_name"],
                created_at=self._timestamp(row["created_at"]),
                username=row["username"],
            )
            for row in self._fetch_all(
                _GET_WISHES_PUBLIC, owner_id=owner_id, viewer_id=viewer_id
            )
        ]

    def update_wish_status(self, status: int, chat_id: int, wish_id: int) -> Wish:
        """Change the status of one of the user's wishes."""
        return self._wish(
            self._fetch_one(_UPDATE_WISH_STATUS, status=status, chat_id=chat_id, id=wish_id)
        )