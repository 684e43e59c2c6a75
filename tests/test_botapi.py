import itertools
import json

import httpx
import pytest

from wishbot.botapi import (
    BotApi,
    TelegramError,
    inline_button,
    inline_keyboard,
    parse_update,
    remove_keyboard,
    reply_keyboard,
)


def _bot(handler):
    return BotApi("token", client=httpx.Client(transport=httpx.MockTransport(handler)))


def _ok(result):
    return httpx.Response(200, json={"ok": True, "result": result})


def test_send_message_posts_json_and_parses_reply():
    seen = []

    def handler(request):
        seen.append(request)
        body = json.loads(request.content)
        return _ok({"message_id": 42, "chat": {"id": body["chat_id"]}, "text": body["text"]})

    markup = inline_keyboard([inline_button("Друзья", "friends")])
    message = _bot(handler).send_message(7, "hello", reply_markup=markup)
    assert message.message_id == 42
    assert message.chat.id == 7
    assert message.text == "hello"
    assert seen[0].url.path == "/bottoken/sendMessage"
    assert json.loads(seen[0].content)["reply_markup"] == markup


def test_send_message_omits_missing_markup():
    bodies = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return _ok({"message_id": 1, "chat": {"id": 7}})

    message = _bot(handler).send_message(7, "hi")
    assert message.message_id == 1
    assert message.chat.id == 7
    assert "reply_markup" not in bodies[0]


def test_error_response_raises():
    def handler(request):
        return httpx.Response(400, json={"ok": False, "error_code": 400, "description": "Bad Request"})

    with pytest.raises(TelegramError) as info:
        _bot(handler).delete_message(7, 1)
    assert info.value.error_code == 400
    assert info.value.description == "Bad Request"


def test_transport_failure_raises_telegram_error():
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    with pytest.raises(TelegramError):
        _bot(handler).answer_callback_query("1", "Ждем...")


def test_delete_message_and_answer_callback():
    def handler(request):
        return _ok(True)

    bot = _bot(handler)
    assert bot.delete_message(7, 3) is True
    assert bot.answer_callback_query("abc", "Ждем...") is True


def test_send_photo_uploads_file(tmp_path):
    picture = tmp_path / "pic.jpg"
    picture.write_bytes(b"JPEGDATA")
    seen = []

    def handler(request):
        seen.append(request.read())
        return _ok({"message_id": 5, "chat": {"id": 7}})

    message = _bot(handler).send_photo(7, picture, caption="cap")
    assert message.message_id == 5
    assert b"JPEGDATA" in seen[0]
    assert b"cap" in seen[0]


def test_send_photo_by_file_id():
    bodies = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return _ok({"message_id": 6, "chat": {"id": 7}})

    message = _bot(handler).send_photo(7, "file-id", caption="cap")
    assert message.message_id == 6
    assert bodies[0]["photo"] == "file-id"


def test_send_photo_missing_file_raises(tmp_path):
    def handler(request):
        return _ok({"message_id": 6, "chat": {"id": 7}})

    with pytest.raises(TelegramError):
        _bot(handler).send_photo(7, tmp_path / "absent.jpg")


def test_parse_update_with_callback():
    update = parse_update(
        {
            "update_id": 10,
            "callback_query": {
                "id": "q1",
                "data": "approve:5",
                "from": {"id": 9, "username": "alice"},
                "message": {"message_id": 3, "chat": {"id": 9}, "from": {"id": 1, "username": "bot"}},
            },
        }
    )
    assert update.update_id == 10
    assert update.message is None
    assert update.callback_query.data == "approve:5"
    assert update.callback_query.message.chat.id == 9
    assert update.callback_query.message.sender.user_name == "bot"
    assert update.callback_query.sender.user_name == "alice"


def test_parse_update_with_photo_message():
    update = parse_update(
        {
            "update_id": 11,
            "message": {"message_id": 4, "chat": {"id": 2}, "photo": [{"file_id": "s"}, {"file_id": "l"}]},
        }
    )
    assert update.message.photo == ("s", "l")
    assert update.message.text == ""


def test_keyboards():
    assert inline_keyboard([inline_button("a", "x")], [inline_button("b", "y")]) == {
        "inline_keyboard": [[{"text": "a", "callback_data": "x"}], [{"text": "b", "callback_data": "y"}]]
    }
    assert reply_keyboard(["Меню"])["keyboard"] == [[{"text": "Меню"}]]
    assert remove_keyboard()["remove_keyboard"] is True


def test_iter_updates_advances_offset():
    offsets = []

    def handler(request):
        offset = json.loads(request.content)["offset"]
        offsets.append(offset)
        if offset == 0:
            return _ok([{"update_id": 5}, {"update_id": 6}])
        return _ok([{"update_id": 7}])

    updates = list(itertools.islice(_bot(handler).iter_updates(timeout=1), 3))
    assert [u.update_id for u in updates] == [5, 6, 7]
    assert offsets == [0, 7]