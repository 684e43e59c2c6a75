# wishbot

Building blocks of a Telegram bot for wish lists. Users register with a
unique nickname, keep wishes for products from a catalogue, make friends
and see each other's wishes. Data lives in PostgreSQL; the bot talks to the
Telegram Bot API over HTTP with long polling.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

`wishbot.config.load_configs(path)` reads a YAML file (keys are matched
case-insensitively), stores the result as the process-wide configuration and
returns a copy of it; `wishbot.config.get_configs()` returns a copy of the
stored one.

```yaml
app:
  environment: prod
postgres:
  host: db.example.com:5432
  database: wishbot
  userName: wishbot
  password: password
  sslMode: disable
api:
  port: "8080"
telegram:
  token: token
  admin: ""
migrations:
  migrate: false
```

A non-empty environment variable named `WISHBOT_<SECTION>_<KEY>` overrides
the file, for example `WISHBOT_POSTGRES_HOST` or `WISHBOT_TELEGRAM_TOKEN`.
With `environment: dev` the database host is replaced by `localhost:5432`
and the configuration is printed.

## Modules

- `wishbot.config` – `Config` with its sections `App`, `Postgres`, `Api`,
  `Telegram` and `Migrations`.
- `wishbot.dbbase` – `build_dsn(postgres)` builds the PostgreSQL URL,
  `init_db(postgres)` connects, checks the connection and returns a
  SQLAlchemy engine. A query that must return a row and returns none raises
  `NoRowsError`.
- `wishbot.queries_social`, `wishbot.queries_wishes`,
  `wishbot.queries_orders` – queries on users and friendships, wishes, and
  orders and products. `wishbot.queries_orders.Queries` combines them all.
- `wishbot.models` – frozen dataclasses for the table rows.
- `wishbot.botapi` – `BotApi`, a small Bot API client (`send_message`,
  `send_photo`, `delete_message`, `answer_callback_query`, `get_updates`,
  `iter_updates`), `parse_update` for raw update JSON, and helpers for
  inline and reply keyboards. Failed calls raise `TelegramError`.
- `wishbot.ui` – `BotUI` sends messages and the main menu and remembers
  each chat's last menu message so it can be deleted.
- `wishbot.state` – per-chat conversation state (`UserState`,
  `set_user_state`, `get_user_state`, `clear_user_state`).
- `wishbot.services_people` – `PeopleService`: greeting, registration,
  nickname change, profile deletion and friendship requests, listing and
  removal.
- `wishbot.messages` – the texts sent to users.
- `wishbot.errors` – `Errornate`, an exception with a status code and the
  file and line where it was built, and constructors such as
  `err_not_found` and `custom_error`.

## Example

```python
from wishbot.botapi import BotApi
from wishbot.config import load_configs
from wishbot.dbbase import init_db
from wishbot.queries_orders import Queries
from wishbot.services_people import PeopleService

config = load_configs("config/wishbot.yaml")
db = Queries(init_db(config.postgres))
bot = BotApi(config.telegram.token)
people = PeopleService(bot, db)

for update in bot.iter_updates():
    if update.message and update.message.text == "/start":
        people.start_message_handler(update.message)
```

## What the package does not do

There is no command that starts the bot and no dispatcher that routes
incoming updates and button presses to the services: the loop above has to
be written by the user. Wish, catalogue and order handling for users exists
only as database queries, not as bot services. Database migrations are not
included; the tables must already exist.