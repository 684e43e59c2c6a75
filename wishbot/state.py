"""Per-chat conversation state."""

from __future__ import annotations

from enum import Enum


class UserState(str, Enum):
    """What the bot expects the next text message of a chat to hold."""

    CREATE_USER_WAITING = "create_user_waiting"
    CREATE_USER_ADRESS = "create_user_adress"
    CREATE_USER_NAME = "create_user_name"
    CREATE_USER_PHONE = "create_user_phone"
    UPDATE_USER_WAITING = "update_user_waiting"
    GET_USER_WISH = "get_user_wish"
    ADD_FRIEND_WAIT = "add_friend_wait"


_user_states: dict[int, UserState] = {}


def set_user_state(chat_id: int, state: UserState) -> None:
    """Remember what the chat is expected to send next."""
    _user_states[chat_id] = UserState(state)


def get_user_state(chat_id: int) -> UserState | None:
    """Return the chat's state, or None when it has none."""
    return _user_states.get(chat_id)


def clear_user_state(chat_id: int) -> None:
    """Forget the chat's state."""
    _user_states.pop(chat_id, None)