"""Message sending and the main menu shared by the bot's handlers."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .botapi import BotApi, Message, TelegramError, inline_button, inline_keyboard, reply_keyboard
from .state import clear_user_state

logger = logging.getLogger(__name__)

MENU_BUTTON = "Меню"
CHOOSE_ACTION = "Выберите действие: "


class BotUI:
    """Sends messages and menus and tracks each chat's last menu message."""

    def __init__(self, bot: BotApi, service: Any) -> None:
        self.bot = bot
        self.service = service
        self.last_message_ids: dict[int, int] = {}

    def send_message(self, chat_id: int, text: str) -> Message | None:
        """Send plain text; log and return None if sending fails."""
        try:
            return self.bot.send_message(chat_id, text)
        except TelegramError as exc:
            logger.error("Ошибка при отправке сообщения: %s", exc)
            return None

    def delete_last_message(self, chat_id: int) -> None:
        """Delete the chat's last tracked menu message and forget it."""
        try:
            self.bot.delete_message(chat_id, self.last_message_ids.get(chat_id, 0))
        except TelegramError as exc:
            logger.error("Ошибка удаления сообщения: %s", exc)
        self.last_message_ids.pop(chat_id, None)

    def _remember_last_message(
        self, chat_id: int, text: str, markup: Mapping[str, Any]
    ) -> Message | None:
        try:
            sent = self.bot.send_message(chat_id, text, reply_markup=markup)
        except TelegramError as exc:
            logger.error("Ошибка при отправке встроенного меню: %s", exc)
            sent = None
        self.last_message_ids[chat_id] = sent.message_id if sent else 0
        return sent

    def send_menu_button(self, chat_id: int) -> None:
        """Show the reply keyboard with the menu button."""
        try:
            self.bot.send_message(chat_id, MENU_BUTTON, reply_markup=reply_keyboard([MENU_BUTTON]))
        except TelegramError as exc:
            logger.error("Ошибка при отправке встроенного меню: %s", exc)

    def send_inline_menu(self, chat_id: int) -> None:
        """Reset the chat's state and show the main inline menu."""
        clear_user_state(chat_id)
        self.send_menu_button(chat_id)
        markup = inline_keyboard(
            [
                inline_button("Регистрация", "register"),
                inline_button("Удалить пользователя", "delete_user"),
            ],
            [inline_button("Редактировать никнейм", "edit_nickname")],
            [inline_button("Друзья", "friends")],
            [
                inline_button("Каталог продуктов", "catalog"),
                inline_button("Мои желания", "my_wishes"),
            ],
        )
        self._remember_last_message(chat_id, CHOOSE_ACTION, markup)