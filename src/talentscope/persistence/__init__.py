"""Key-value persistence standing in for durable client storage."""

from __future__ import annotations

import json
import sqlite3
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol


SESSION_KEY = "session_user"


def sharing_key(user_id: str) -> str:
    return f"sharing_{user_id}"


def talent_flag_key(user_id: str) -> str:
    return f"talent_flag_{user_id}"


def data_access_key(user_id: str) -> str:
    return f"data_access_{user_id}"


def saved_players_key(scout_id: str) -> str:
    return f"saved_players_{scout_id}"


def contact_request_key(scout_id: str, player_id: str) -> str:
    return f"contact_request_{scout_id}_{player_id}"


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def keys(self, prefix: str = "") -> List[str]: ...


def get_json(store: KeyValueStore, key: str) -> Any:
    raw = store.get(key)
    if raw is None:
        return None
    return json.loads(raw)


def set_json(store: KeyValueStore, key: str, value: Any) -> None:
    store.set(key, json.dumps(value))


class MemoryKeyValueStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self, prefix: str = "") -> List[str]:
        return sorted(key for key in self._data if key.startswith(prefix))


class SqliteKeyValueStore:
    """Simple SQLite-backed key-value table."""

    def __init__(self, db_path: Path | str):
        self._memory_conn: sqlite3.Connection | None = None
        if str(db_path) == ":memory:":
            self.db_path: Path | str = ":memory:"
            self._memory_conn = sqlite3.connect(":memory:")
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        if self._memory_conn is not None:
            return self._memory_conn
        assert isinstance(self.db_path, Path)
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
        except (OSError, sqlite3.OperationalError):
            fallback_dir = Path(tempfile.gettempdir()) / "talentscope-runtime"
            fallback_dir.mkdir(parents=True, exist_ok=True)
            self.db_path = fallback_dir / "talentscope.sqlite"
            conn = sqlite3.connect(self.db_path)
            self._create_schema(conn)
        return conn

    def _ensure_schema(self) -> None:
        conn = self._connect()
        try:
            self._create_schema(conn)
        finally:
            self._release(conn)

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.commit()

    def _release(self, conn: sqlite3.Connection) -> None:
        if conn is not self._memory_conn:
            conn.close()

    def get(self, key: str) -> Optional[str]:
        conn = self._connect()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        finally:
            self._release(conn)
        if row is None:
            return None
        return row[0]

    def set(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        conn = self._connect()
        try:
            conn.execute(
                """
                INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (key, value, now),
            )
            conn.commit()
        finally:
            self._release(conn)

    def delete(self, key: str) -> None:
        conn = self._connect()
        try:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            self._release(conn)

    def keys(self, prefix: str = "") -> List[str]:
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT key FROM kv WHERE substr(key, 1, ?) = ? ORDER BY key",
                (len(prefix), prefix),
            ).fetchall()
        finally:
            self._release(conn)
        return [row[0] for row in rows]


__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SESSION_KEY",
    "SqliteKeyValueStore",
    "contact_request_key",
    "data_access_key",
    "get_json",
    "saved_players_key",
    "set_json",
    "sharing_key",
    "talent_flag_key",
]
