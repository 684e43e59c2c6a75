import uuid

import pytest
import sqlalchemy as sa

from wishbot.dbbase import NoRowsError
from wishbot.queries_wishes import WishQueries

SCHEMA = [
    """CREATE TABLE users (
        username TEXT NOT NULL,
        chat_id INTEGER PRIMARY KEY,
        created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
    )""",
    """CREATE TABLE dim_wish_status (id INTEGER PRIMARY KEY, status_name TEXT NOT NULL)""",
    """CREATE TABLE friends (
        chat_id INTEGER NOT NULL,
        friend_id INTEGER NOT NULL,
        status INTEGER NOT NULL DEFAULT 2,
        created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
    )""",
    """CREATE TABLE wish (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        chat_id INTEGER NOT NULL,
        created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
        product_id TEXT NOT NULL,
        status INTEGER NOT NULL
    )""",
    "INSERT INTO dim_wish_status (id, status_name) VALUES (1, 'public'), (2, 'private')",
    "INSERT INTO users (username, chat_id) VALUES ('owner', 10), ('friend', 20), ('stranger', 30)",
]

PUBLIC = 1
PRIVATE = 2


@pytest.fixture
def engine(tmp_path):
    eng = sa.create_engine(f"sqlite:///{tmp_path / 'wishes.sqlite'}")
    with eng.begin() as conn:
        for stmt in SCHEMA:
            conn.execute(sa.text(stmt))
    return eng


@pytest.fixture
def queries(engine):
    return WishQueries(engine)


def _befriend(engine, a, b, status):
    with engine.begin() as conn:
        conn.execute(
            sa.text("INSERT INTO friends (chat_id, friend_id, status) VALUES (:a, :b, :s)"),
            {"a": a, "b": b, "s": status},
        )


def test_create_and_get_wish(queries):
    product = uuid.uuid4()
    created = queries.create_wish(10, product, PUBLIC)
    assert created.chat_id == 10
    assert created.product_id == product
    assert created.status == PUBLIC
    assert queries.get_wish(10, created.id) == created
    assert queries.get_wish_by_id(created.id) == created


def test_get_wish_of_other_user_raises(queries):
    created = queries.create_wish(10, uuid.uuid4(), PUBLIC)
    with pytest.raises(NoRowsError):
        queries.get_wish(20, created.id)
    with pytest.raises(NoRowsError):
        queries.get_wish_by_id(created.id + 1000)


def test_wishes_for_user(queries):
    first = queries.create_wish(10, uuid.uuid4(), PUBLIC)
    second = queries.create_wish(10, uuid.uuid4(), PRIVATE)
    queries.create_wish(20, uuid.uuid4(), PUBLIC)
    wishes = sorted(queries.get_wishes_for_user(10), key=lambda w: w.id)
    assert [w.id for w in wishes] == [first.id, second.id]
    assert [w.product_id for w in wishes] == [first.product_id, second.product_id]
    assert [w.status_name for w in wishes] == ["public", "private"]
    assert all(w.username == "owner" and w.chat_id == 10 for w in wishes)


def test_stranger_sees_only_public(queries):
    public = queries.create_wish(10, uuid.uuid4(), PUBLIC)
    queries.create_wish(10, uuid.uuid4(), PRIVATE)
    visible = queries.get_wishes_public(10, 30)
    assert [w.id for w in visible] == [public.id]
    assert visible[0].username == "owner"
    assert visible[0].product_id == public.product_id


@pytest.mark.parametrize("direction", [(10, 20), (20, 10)])
def test_approved_friend_sees_private(engine, queries, direction):
    public = queries.create_wish(10, uuid.uuid4(), PUBLIC)
    private = queries.create_wish(10, uuid.uuid4(), PRIVATE)
    _befriend(engine, *direction, 1)
    visible = {w.id for w in queries.get_wishes_public(10, 20)}
    assert visible == {public.id, private.id}


def test_pending_friend_sees_only_public(engine, queries):
    public = queries.create_wish(10, uuid.uuid4(), PUBLIC)
    queries.create_wish(10, uuid.uuid4(), PRIVATE)
    _befriend(engine, 20, 10, 2)
    assert [w.id for w in queries.get_wishes_public(10, 20)] == [public.id]


def test_update_wish_status(queries):
    created = queries.create_wish(10, uuid.uuid4(), PUBLIC)
    updated = queries.update_wish_status(PRIVATE, 10, created.id)
    assert updated.status == PRIVATE
    assert queries.get_wish_by_id(created.id).status == PRIVATE


def test_update_wish_of_other_user_raises(queries):
    created = queries.create_wish(10, uuid.uuid4(), PUBLIC)
    with pytest.raises(NoRowsError):
        queries.update_wish_status(PRIVATE, 20, created.id)
    assert queries.get_wish_by_id(created.id).status == PUBLIC


def test_delete_wish(queries):
    created = queries.create_wish(10, uuid.uuid4(), PUBLIC)
    queries.delete_wish(20, created.id)
    assert queries.get_wish_by_id(created.id) == created
    queries.delete_wish(10, created.id)
    with pytest.raises(NoRowsError):
        queries.get_wish_by_id(created.id)
    assert queries.get_wishes_for_user(10) == []