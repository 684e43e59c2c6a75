[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wishbot"
version = "0.1.0"
description = "Building blocks of a Telegram wish-list bot: configuration, PostgreSQL queries, a Bot API client and user and friendship services"
requires-python = ">=3.10"
keywords = ["telegram", "bot", "wishlist", "gifts", "postgresql"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "pyyaml",
    "httpx",
    "sqlalchemy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["wishbot"]

[tool.pytest.ini_options]
addopts = "-ra"
