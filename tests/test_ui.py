import json

import httpx

from wishbot.botapi import BotApi
from wishbot.state import UserState, get_user_state, set_user_state
from wishbot.ui import BotUI


class Recorder:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail
        self.next_id = 100

    def __call__(self, request):
        method = request.url.path.rsplit("/", 1)[-1]
        body = json.loads(request.content)
        self.calls.append((method, body))
        if self.fail:
            return httpx.Response(400, json={"ok": False, "error_code": 400, "description": "Bad Request"})
        if method == "deleteMessage":
            return httpx.Response(200, json={"ok": True, "result": True})
        self.next_id += 1
        return httpx.Response(
            200,
            json={"ok": True, "result": {"message_id": self.next_id, "chat": {"id": body["chat_id"]}}},
        )


def _ui(recorder):
    bot = BotApi("token", client=httpx.Client(transport=httpx.MockTransport(recorder)))
    return BotUI(bot, service=None)


def test_send_message_returns_sent_message():
    recorder = Recorder()
    sent = _ui(recorder).send_message(5, "hello")
    assert sent.message_id == recorder.next_id
    assert recorder.calls == [("sendMessage", {"chat_id": 5, "text": "hello"})]


def test_send_message_failure_returns_none():
    assert _ui(Recorder(fail=True)).send_message(5, "hello") is None


def test_send_menu_button_uses_reply_keyboard():
    recorder = Recorder()
    _ui(recorder).send_menu_button(5)
    method, body = recorder.calls[0]
    assert method == "sendMessage"
    assert body["text"] == "Меню"
    assert body["reply_markup"]["keyboard"] == [[{"text": "Меню"}]]


def test_send_inline_menu_clears_state_and_tracks_message():
    recorder = Recorder()
    ui = _ui(recorder)
    set_user_state(6, UserState.ADD_FRIEND_WAIT)
    ui.send_inline_menu(6)
    assert get_user_state(6) is None
    assert [method for method, _ in recorder.calls] == ["sendMessage", "sendMessage"]
    rows = recorder.calls[1][1]["reply_markup"]["inline_keyboard"]
    data = [button["callback_data"] for row in rows for button in row]
    assert data == ["register", "delete_user", "edit_nickname", "friends", "catalog", "my_wishes"]
    assert ui.last_message_ids[6] == recorder.next_id


def test_failed_inline_menu_tracks_zero():
    ui = _ui(Recorder(fail=True))
    ui.send_inline_menu(8)
    assert ui.last_message_ids[8] == 0


def test_delete_last_message_uses_tracked_id_and_forgets_it():
    recorder = Recorder()
    ui = _ui(recorder)
    ui.send_inline_menu(7)
    tracked = ui.last_message_ids[7]
    ui.delete_last_message(7)
    assert recorder.calls[-1] == ("deleteMessage", {"chat_id": 7, "message_id": tracked})
    assert 7 not in ui.last_message_ids


def test_delete_last_message_failure_still_forgets():
    ui = _ui(Recorder(fail=True))
    ui.last_message_ids[9] = 3
    ui.delete_last_message(9)
    assert 9 not in ui.last_message_ids