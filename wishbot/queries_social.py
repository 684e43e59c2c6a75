"""Queries on users, their delivery details and friendships."""

from __future__ import annotations

from dataclasses import dataclass

from .dbbase import QueriesBase
from .models import Friend, User

_CREATE_FRIENDSHIP = """
INSERT INTO friends (
    chat_id,
    friend_id
) VALUES (
    :chat_id, :friend_id
) RETURNING chat_id, friend_id, status, created_at
"""

_DELETE_FRIENDSHIP = """
DELETE FROM friends
WHERE chat_id = :chat_id AND friend_id = :friend_id
"""

_GET_APPROVED_FRIENDSHIPS = """
SELECT
    u_friend.username AS username,
    u_friend.chat_id AS friend_id
FROM friends f
JOIN users u_friend ON u_friend.chat_id = f.friend_id
JOIN dim_friend_status d ON d.id = f.status
WHERE
    f.chat_id = :chat_id
    AND f.status = 1

UNION

SELECT
    u_chat.username AS username,
    u_chat.chat_id AS friend_id
FROM friends f
JOIN users u_chat ON u_chat.chat_id = f.chat_id
JOIN dim_friend_status d ON d.id = f.status
WHERE
    f.friend_id = :chat_id
    AND f.status = 1
"""

_GET_FRIENDSHIP = """
SELECT chat_id, friend_id, status, created_at FROM friends
WHERE chat_id = :chat_id AND friend_id = :friend_id LIMIT 1
"""

_GET_PENDING_FRIENDSHIPS = """
SELECT
    u_friend.username AS username,
    u_friend.chat_id AS friend_id,
    d.status_name AS status_name
FROM friends f
JOIN users u_friend ON u_friend.chat_id = f.friend_id
JOIN dim_friend_status d ON d.id = f.status
WHERE
    f.chat_id = :chat_id
    AND f.status != 1

UNION

SELECT
    u_chat.username AS username,
    u_chat.chat_id AS friend_id,
    d.status_name AS status_name
FROM friends f
JOIN users u_chat ON u_chat.chat_id = f.chat_id
JOIN dim_friend_status d ON d.id = f.status
WHERE
    f.friend_id = :chat_id
    AND f.status != 1
"""

_UPDATE_FRIENDSHIP_STATUS = """
UPDATE friends
SET status = :status
WHERE chat_id = :chat_id AND friend_id = :friend_id
RETURNING chat_id, friend_id, status, created_at
"""

_CREATE_USER = """
INSERT INTO users (
    username,
    chat_id
) VALUES (
    :username, :chat_id
) RETURNING username, chat_id, created_at
"""

_CREATE_USER_INFO = """
INSERT INTO user_info (
    chat_id,
    address,
    phone,
    name,
    description
) VALUES (
    :chat_id, :address, :phone, :name, :description
)
"""

_DELETE_USER = """
DELETE FROM users
WHERE chat_id = :chat_id
"""

_GET_USER = """
SELECT username, chat_id, created_at FROM users
WHERE chat_id = :chat_id LIMIT 1
"""

_GET_USER_BY_USERNAME = """
SELECT username, chat_id, created_at FROM users
WHERE username = :username LIMIT 1
"""

_UPDATE_USER = """
UPDATE users
SET username = :username
WHERE chat_id = :chat_id
RETURNING username, chat_id, created_at
"""

_UPDATE_USER_INFO_ADDRESS = """
UPDATE user_info
SET address = :address
WHERE chat_id = :chat_id
"""

_UPDATE_USER_INFO_DESCRIPTION = """
UPDATE user_info
SET description = :description
WHERE chat_id = :chat_id
"""

_UPDATE_USER_INFO_NAME = """
UPDATE user_info
SET name = :name
WHERE chat_id = :chat_id
"""

_UPDATE_USER_INFO_PHONE = """
UPDATE user_info
SET phone = :phone
WHERE chat_id = :chat_id
"""


@dataclass(frozen=True)
class ApprovedFriend:
    """A confirmed friend of a user."""

    username: str
    friend_id: int


@dataclass(frozen=True)
class PendingFriend:
    """A friendship that is not yet confirmed, in either direction."""

    username: str
    friend_id: int
    status_name: str


class SocialQueries(QueriesBase):
    """Statements on the users, user_info and friends tables."""

    def _friend(self, row) -> Friend:
        return Friend(
            chat_id=int(row["chat_id"]),
            friend_id=int(row["friend_id"]),
            status=int(row["status"]),
            created_at=self._timestamp(row["created_at"]),
        )

    def _user(self, row) -> User:
        return User(
            username=row["username"],
            chat_id=int(row["chat_id"]),
            created_at=self._timestamp(row["created_at"]),
        )

    def create_friendship(self, chat_id: int, friend_id: int) -> Friend:
        """Record a friendship request from chat_id to friend_id."""
        return self._friend(
            self._fetch_one(_CREATE_FRIENDSHIP, chat_id=chat_id, friend_id=friend_id)
        )

    def delete_friendship(self, chat_id: int, friend_id: int) -> None:
        """Remove the friendship row from chat_id to friend_id."""
        self._execute(_DELETE_FRIENDSHIP, chat_id=chat_id, friend_id=friend_id)

    def get_approved_friendships(self, chat_id: int) -> list[ApprovedFriend]:
        """Confirmed friends of the user, whoever sent the request."""
        return [
            ApprovedFriend(username=row["username"], friend_id=int(row["friend_id"]))
            for row in self._fetch_all(_GET_APPROVED_FRIENDSHIPS, chat_id=chat_id)
        ]

    def get_friendship(self, chat_id: int, friend_id: int) -> Friend:
        """The friendship row from chat_id to friend_id."""
        return self._friend(self._fetch_one(_GET_FRIENDSHIP, chat_id=chat_id, friend_id=friend_id))

    def get_pending_friendships(self, chat_id: int) -> list[PendingFriend]:
        """Unconfirmed friendships of the user, whoever sent the request."""
        return [
            PendingFriend(
                username=row["username"],
                friend_id=int(row["friend_id"]),
                status_name=row["status_name"],
            )
            for row in self._fetch_all(_GET_PENDING_FRIENDSHIPS, chat_id=chat_id)
        ]

    def update_friendship_status(self, status: int, chat_id: int, friend_id: int) -> Friend:
        """Set the status of the friendship from chat_id to friend_id."""
        return self._friend(
            self._fetch_one(
                _UPDATE_FRIENDSHIP_STATUS, status=status, chat_id=chat_id, friend_id=friend_id
            )
        )

    def create_user(self, username: str, chat_id: int) -> User:
        """Register a user."""
        return self._user(self._fetch_one(_CREATE_USER, username=username, chat_id=chat_id))

    def create_user_info(
        self, chat_id: int, address: str, phone: str, name: str, description: str
    ) -> None:
        """Store a user's delivery details."""
        self._execute(
            _CREATE_USER_INFO,
            chat_id=chat_id,
            address=address,
            phone=phone,
            name=name,
            description=description,
        )

    def delete_user(self, chat_id: int) -> None:
        """Remove a user."""
        self._execute(_DELETE_USER, chat_id=chat_id)

    def get_user(self, chat_id: int) -> User:
        """The user with the given chat id."""
        return self._user(self._fetch_one(_GET_USER, chat_id=chat_id))

    def get_user_by_username(self, username: str) -> User:
        """The user with the given username."""
        return self._user(self._fetch_one(_GET_USER_BY_USERNAME, username=username))

    def update_user(self, username: str, chat_id: int) -> User:
        """Change a user's username."""
        return self._user(self._fetch_one(_UPDATE_USER, username=username, chat_id=chat_id))

    def update_user_info_address(self, address: str, chat_id: int) -> None:
        """Change a user's delivery address."""
        self._execute(_UPDATE_USER_INFO_ADDRESS, address=address, chat_id=chat_id)

    def update_user_info_description(self, description: str, chat_id: int) -> None:
        """Change a user's note for the courier."""
        self._execute(_UPDATE_USER_INFO_DESCRIPTION, description=description, chat_id=chat_id)

    def update_user_info_name(self, name: str, chat_id: int) -> None:
        """Change a user's recipient name."""
        self._execute(_UPDATE_USER_INFO_NAME, name=name, chat_id=chat_id)

    def update_user_info_phone(self, phone: str, chat_id: int) -> None:
        """Change a user's phone."""
        self._execute(_UPDATE_USER_INFO_PHONE, phone=phone, chat_id=chat_id)