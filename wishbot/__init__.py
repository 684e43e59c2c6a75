"""Building blocks of a Telegram wish-list bot: configuration, database queries, a Bot API client and user services."""

__version__ = "0.1.0"