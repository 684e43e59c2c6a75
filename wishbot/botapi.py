"""A small client for the Telegram Bot API."""

from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Mapping, Sequence

import httpx

logger = logging.getLogger(__name__)

API_URL = "https://api.telegram.org/bot{token}/{method}"
RETRY_DELAY = 3.0


class TelegramError(Exception):
    """A failed Bot API call."""

    def __init__(self, description: str, error_code: int | None = None) -> None:
        super().__init__(description)
        self.description = description
        self.error_code = error_code


@dataclass(frozen=True)
class Chat:
    id: int


@dataclass(frozen=True)
class Sender:
    id: int
    user_name: str = ""


@dataclass(frozen=True)
class Message:
    message_id: int
    chat: Chat
    text: str = ""
    sender: Sender | None = None
    photo: tuple[str, ...] = ()


@dataclass(frozen=True)
class CallbackQuery:
    id: str
    data: str
    message: Message | None = None
    sender: Sender | None = None


@dataclass(frozen=True)
class Update:
    update_id: int
    message: Message | None = None
    callback_query: CallbackQuery | None = None


def _parse_sender(data: Mapping[str, Any] | None) -> Sender | None:
    if not data:
        return None
    return Sender(id=int(data["id"]), user_name=data.get("username", ""))


def _parse_message(data: Mapping[str, Any] | None) -> Message | None:
    if not data:
        return None
    return Message(
        message_id=int(data["message_id"]),
        chat=Chat(id=int(data["chat"]["id"])),
        text=data.get("text", ""),
        sender=_parse_sender(data.get("from")),
        photo=tuple(size["file_id"] for size in data.get("photo", ())),
    )


def parse_update(data: Mapping[str, Any]) -> Update:
    """Turn a decoded update object into an Update."""
    query = data.get("callback_query")
    callback = None
    if query:
        callback = CallbackQuery(
            id=str(query["id"]),
            data=query.get("data", ""),
            message=_parse_message(query.get("message")),
            sender=_parse_sender(query.get("from")),
        )
    return Update(
        update_id=int(data["update_id"]),
        message=_parse_message(data.get("message")),
        callback_query=callback,
    )


def inline_button(text: str, data: str) -> dict[str, str]:
    """An inline button that sends callback data when pressed."""
    return {"text": text, "callback_data": data}


def inline_keyboard(*args: Sequence[Mapping[str, str]]) -> dict[str, Any]:
    """Inline keyboard markup; each argument is one row of buttons."""
    return {"inline_keyboard": [list(row) for row in args]}


def reply_keyboard(*args: Sequence[str]) -> dict[str, Any]:
    """Reply keyboard markup; each argument is one row of button texts."""
    return {
        "keyboard": [[{"text": text} for text in row] for row in args],
        "resize_keyboard": True,
    }


def remove_keyboard() -> dict[str, Any]:
    """Markup that removes the reply keyboard."""
    return {"remove_keyboard": True, "selective": True}


class BotApi:
    """Calls Bot API methods for one bot token."""

    def __init__(self, token: str, client: httpx.Client | None = None) -> None:
        self.token = token
        self._client = client if client is not None else httpx.Client(timeout=75.0)

    def _call(
        self,
        method: str,
        payload: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> Any:
        url = API_URL.format(token=self.token, method=method)
        params = {key: value for key, value in (payload or {}).items() if value is not None}
        try:
            if files:
                form = {
                    key: value if isinstance(value, str) else json.dumps(value)
                    for key, value in params.items()
                }
                response = self._client.post(url, data=form, files=files)
            else:
                response = self._client.post(url, json=params)
            body = response.json()
        except httpx.HTTPError as exc:
            raise TelegramError(f"{method}: {exc}") from exc
        except ValueError as exc:
            raise TelegramError(f"{method}: invalid response") from exc
        if not isinstance(body, Mapping) or not body.get("ok"):
            description = body.get("description", "request failed") if isinstance(body, Mapping) else "request failed"
            code = body.get("error_code") if isinstance(body, Mapping) else None
            raise TelegramError(description, code)
        return body.get("result")

    def send_message(
        self, chat_id: int, text: str, reply_markup: Mapping[str, Any] | None = None
    ) -> Message:
        """Send a text message and return it as delivered."""
        result = self._call(
            "sendMessage", {"chat_id": chat_id, "text": text, "reply_markup": reply_markup}
        )
        return _parse_message(result)

    def send_photo(
        self,
        chat_id: int,
        photo: str | os.PathLike[str],
        caption: str | None = None,
        reply_markup: Mapping[str, Any] | None = None,
    ) -> Message:
        """Send a photo: a path is uploaded, a string is a file id or URL."""
        payload: dict[str, Any] = {
            "chat_id": chat_id,
            "caption": caption,
            "reply_markup": reply_markup,
        }
        if isinstance(photo, os.PathLike):
            path = Path(photo)
            try:
                content = path.read_bytes()
            except OSError as exc:
                raise TelegramError(f"cannot read photo {path}: {exc}") from exc
            result = self._call("sendPhoto", payload, files={"photo": (path.name, content)})
        else:
            payload["photo"] = photo
            result = self._call("sendPhoto", payload)
        return _parse_message(result)

    def delete_message(self, chat_id: int, message_id: int) -> bool:
        """Delete a message from a chat."""
        return bool(self._call("deleteMessage", {"chat_id": chat_id, "message_id": message_id}))

    def answer_callback_query(self, callback_query_id: str, text: str | None = None) -> bool:
        """Acknowledge a callback query, optionally showing a notice."""
        return bool(
            self._call("answerCallbackQuery", {"callback_query_id": callback_query_id, "text": text})
        )

    def get_updates(self, offset: int = 0, timeout: int = 0) -> list[Update]:
        """Fetch pending updates starting at offset."""
        result = self._call("getUpdates", {"offset": offset, "timeout": timeout})
        return [parse_update(item) for item in result or ()]

    def iter_updates(self, timeout: int = 60) -> Iterator[Update]:
        """Long-poll for updates forever, yielding each one once."""
        offset = 0
        while True:
            try:
                updates = self.get_updates(offset, timeout)
            except TelegramError as exc:
                logger.error("Failed to get updates, retrying in 3 seconds...: %s", exc)
                time.sleep(RETRY_DELAY)
                continue
            for update in updates:
                if update.update_id >= offset:
                    offset = update.update_id + 1
                    yield update