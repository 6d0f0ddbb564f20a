"""Flat-file stores wired onto the Flask app."""
from __future__ import annotations

import os

from repositories.history_repository import HistoryRepository
from repositories.json_file import JsonFileStore
from repositories.user_repository import UserRepository

USERS_FILE = "users.json"
HISTORY_FILE = "history.json"


def init_storage(app) -> None:
    cfg = app.config
    data_dir = cfg["DATA_DIR"]

    users_store = JsonFileStore(os.path.join(data_dir, USERS_FILE), list)
    history_store = JsonFileStore(os.path.join(data_dir, HISTORY_FILE), dict)
    users_store.ensure()
    history_store.ensure()

    app.extensions["user_repository"] = UserRepository(
        users_store, hash_method=cfg["PASSWORD_HASH_METHOD"]
    )
    app.extensions["history_repository"] = HistoryRepository(
        history_store, limit=cfg["HISTORY_LIMIT"]
    )
    app.logger.info(f"Data files ready in {data_dir}")
