"""User accounts and friendships, as the bot presents them to users."""

from __future__ import annotations

import contextlib
import logging
from typing import Any, Mapping

from sqlalchemy.exc import SQLAlchemyError

from .botapi import BotApi, CallbackQuery, Message, TelegramError, inline_button, inline_keyboard
from .dbbase import NoRowsError
from .errors import custom_error
from .messages import START_MESSAGE
from .models import User
from .queries_orders import Queries

logger = logging.getLogger(__name__)

DB_ERRORS = (NoRowsError, SQLAlchemyError)
NO_FRIENDS_MESSAGE = "У вас нет друзей!\nAXAXAXAX"


class PeopleService:
    """Registration, profile changes and friendships of the bot's users."""

    def __init__(self, bot: BotApi, db: Queries) -> None:
        self.bot = bot
        self.db = db
        self.last_messages: dict[int, int] = {}

    def _send(
        self, chat_id: int, text: str, reply_markup: Mapping[str, Any] | None = None
    ) -> Message:
        try:
            return self.bot.send_message(chat_id, text, reply_markup=reply_markup)
        except TelegramError as exc:
            logger.error("Ошибка при отправке сообщения: %s", exc)
            raise

    def _send_message(
        self, chat_id: int, text: str, reply_markup: Mapping[str, Any] | None = None
    ) -> Message | None:
        """Send a message; a failure is logged and gives None."""
        try:
            return self._send(chat_id, text, reply_markup)
        except TelegramError:
            return None

    def _send_menu(self, chat_id: int, text: str, markup: Mapping[str, Any]) -> Message | None:
        try:
            return self.bot.send_message(chat_id, text, reply_markup=markup)
        except TelegramError as exc:
            logger.error("Ошибка при отправке встроенного меню: %s", exc)
            return None

    def _delete_last_message(self, chat_id: int) -> None:
        try:
            self.bot.delete_message(chat_id, self.last_messages.get(chat_id, 0))
        except TelegramError as exc:
            logger.error("Ошибка удаления сообщения: %s", exc)
        self.last_messages.pop(chat_id, None)

    def start_message_handler(self, message: Message) -> None:
        """Greet the user and offer to create a profile."""
        chat_id = message.chat.id
        self._send_message(chat_id, START_MESSAGE)
        markup = inline_keyboard([inline_button("Создать профиль", "register")])
        self._send_message(chat_id, "Добро пожаловать в Wish Bot!", markup)

    def create_user_handler(self, message: Message) -> User | None:
        """Register the chat under the username in the message text.

        Returns the new user, or None when the chat is already registered or the
        name is taken (the user is told either way).
        """
        chat_id = message.chat.id
        try:
            self.db.get_user(chat_id)
        except DB_ERRORS:
            pass
        else:
            self._send(chat_id, "Вы уже зарегистрированы!")
            return None

        try:
            self.db.get_user_by_username(message.text)
        except NoRowsError:
            pass
        except SQLAlchemyError as exc:
            raise custom_error(str(exc)) from exc
        else:
            self._send(
                chat_id, "Такой username занят! Придумайте другой и попробуйте снова."
            )
            return None

        user = self.db.create_user(message.text, chat_id)
        self._send(chat_id, f"Пользователь успешно зарегистрирован! Ваш ник: {message.text}.")
        return user

    def update_user_handler(self, message: Message) -> User:
        """Change the chat's username to the message text."""
        user = self.db.update_user(message.text, message.chat.id)
        self._send_message(message.chat.id, f"Успешно!\nВаш новый username: \n{user.username}")
        return user

    def delete_user_handler(self, query: CallbackQuery) -> None:
        """Delete the user with their pending friendships and wishes."""
        chat_id = query.message.chat.id
        for friend in self.db.get_pending_friendships(chat_id):
            with contextlib.suppress(SQLAlchemyError):
                self.db.delete_friendship(chat_id, friend.friend_id)
            with contextlib.suppress(SQLAlchemyError):
                self.db.delete_friendship(friend.friend_id, chat_id)
        for wish in self.db.get_wishes_for_user(chat_id):
            with contextlib.suppress(SQLAlchemyError):
                self.db.delete_wish(wish.chat_id, wish.id)
        self.db.delete_user(chat_id)

    def create_friendship(self, chat_id: int, friend_name: str) -> None:
        """Send a friendship request from the chat to the user called friend_name."""
        try:
            friend = self.db.get_user_by_username(friend_name)
        except DB_ERRORS:
            self._send_message(chat_id, "Такого пользователя не существует!")
            raise
        try:
            self.db.create_friendship(chat_id, friend.chat_id)
        except DB_ERRORS as exc:
            logger.error("%s", exc)
            self._send_message(chat_id, "Ошибка отправки запроса дружбы")
            raise

        try:
            sender_name = self.db.get_user(chat_id).username
        except DB_ERRORS:
            sender_name = ""

        markup = inline_keyboard(
            [
                inline_button("Подтвердить", f"approve:{chat_id}"),
                inline_button("Отклонить", f"decline:{chat_id}"),
            ]
        )
        sent = self.bot.send_message(
            friend.chat_id,
            "Пользователь " + sender_name + " отправил вам запрос дружбы",
            reply_markup=markup,
        )
        self.last_messages.setdefault(friend.chat_id, sent.message_id)
        self._send_message(chat_id, "Запрос отправлен!")

    def get_user_friends(self, chat_id: int) -> None:
        """List the chat's confirmed friends, each with its own buttons."""
        try:
            friends = self.db.get_approved_friendships(chat_id)
        except DB_ERRORS:
            friends = []
        if not friends:
            self._send_message(chat_id, NO_FRIENDS_MESSAGE)
            return
        for friend in friends:
            markup = inline_keyboard(
                [
                    inline_button("Удалить друга", f"delete_friend:{friend.friend_id}"),
                    inline_button("Желание друга", f"get_wishes:{friend.username}"),
                ]
            )
            self._send_menu(chat_id, f"Имя друга: {friend.username}", markup)

    def get_pending_friends(self, chat_id: int) -> None:
        """List the chat's unconfirmed friendships with their status."""
        try:
            friends = self.db.get_pending_friendships(chat_id)
        except DB_ERRORS:
            friends = []
        if not friends:
            self._send_message(chat_id, NO_FRIENDS_MESSAGE)
            return
        for friend in friends:
            markup = inline_keyboard(
                [
                    inline_button("Удалить друга", f"delete_friend:+{friend.friend_id}"),
                    inline_button("Желание друга", f"get_wish:{friend.username}"),
                ]
            )
            self._send_menu(
                chat_id,
                f"Имя друга: {friend.username}\nСтатус: {friend.status_name}",
                markup,
            )

    def delete_friend(self, chat_id: int, friend_id: int) -> None:
        """Remove the friendship between two users in both directions."""
        try:
            self.db.delete_friendship(chat_id, friend_id)
            self.db.delete_friendship(friend_id, chat_id)
        except DB_ERRORS:
            self._send_message(chat_id, "Ошибка при удалении дружбы")
            return
        self._send_message(chat_id, "Дружба успешно удалена")

    def update_friendship_status(self, sender_id: int, chat_id: int, status: int) -> None:
        """Set the status of the request sender_id sent to chat_id and drop the request message."""
        with contextlib.suppress(*DB_ERRORS):
            self.db.update_friendship_status(status, sender_id, chat_id)
        self._delete_last_message(chat_id)