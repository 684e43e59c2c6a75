"""Texts the bot sends to users."""

START_MESSAGE = (
    "Привет! 👋 \nЯ твой персональный помощник для управления"
    " желаниями. \nВот что я умею:\n- 📋 Помогу добавить"
    " желания в твой профиль.\n- 🔗 Позволю добавить друзей"
    " и делиться желаниями.\n- 🔒 Ты можешь настроить, будут"
    " твои желания публичными или только для друзей.\n"
)

UPDATE_USER_MESSAGE = (
    "Отлично! Давай обновим твой профиль. \nНапиши мне свое"
    " новое имя! \U0001F58A\ufe0f"
)

CREATE_NICKNAME_MESSAGE = (
    "Хочешь выбрать новое имя? \U0001F58A\ufe0f \nПросто отправь мне своё"
    " желаемое имя, и я обновлю твой профиль!\nНапример:"
    " SuperUser\n🚨 Никнейм должен быть уникальным."
)

ADD_WISH_MESSAGE = "Напиши мне своё" " желание! 🎁"

ADD_FRIEND_MESSAGE = (
    "Отправь никнейм друга, чтобы добавить его"
    " в список! 🤝\nПример: FriendUser\nПосле добавления"
    " вы сможете видеть приватные желания друг друга."
)

FRIEND_WISHES_MESSAGE = (
    "Напиши мне никнейм друга, и я покажу"
    " его публичные желания. 🌟\nПример: FriendUser"
)

DELETE_USER_MESSAGE = (
    "Вы уверены, что хотите удалить свой профиль? 😟\nЭто действие"
    " необратимо, и все ваши данные будут удалены.\n\nЕсли вы"
    " уверены, нажмите кнопку \"Удалить профиль\". \nВ случае,"
    " если передумали, просто вернитесь назад. 😊\n🚨 Подумайте"
    " дважды перед удалением!"
)