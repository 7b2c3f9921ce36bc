from __future__ import annotations

import json
import os
import sqlite3
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence
from contextlib import contextmanager


DATA_DIR = Path(__file__).resolve().parents[1] / "data"
DATA_DIR.mkdir(parents=True, exist_ok=True)

DEFAULT_DB_PATH = DATA_DIR / "competitions.db"

_DB_PATH: Path = Path(os.getenv("COMPETITIONS_DB_PATH", str(DEFAULT_DB_PATH)))


def set_db_path(path: Path | str) -> None:
    global _DB_PATH
    _DB_PATH = Path(path)
    _DB_PATH.parent.mkdir(parents=True, exist_ok=True)


def get_db_path() -> Path:
    return _DB_PATH


def _connect(path: Optional[Path] = None) -> sqlite3.Connection:
    target = Path(path) if path else get_db_path()
    conn = sqlite3.connect(target, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_connection(path: Optional[Path] = None) -> Iterator[sqlite3.Connection]:
    conn = _connect(path)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _ensure_schema_migrations_table(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS schema_migrations (
            version TEXT PRIMARY KEY,
            applied_at TEXT NOT NULL DEFAULT (datetime('now'))
        );
        """
    )


def _get_applied_versions(conn: sqlite3.Connection) -> set[str]:
    _ensure_schema_migrations_table(conn)
    cur = conn.execute("SELECT version FROM schema_migrations")
    return {row[0] for row in cur.fetchall()}


def _record_applied(conn: sqlite3.Connection, version: str) -> None:
    conn.execute("INSERT OR IGNORE INTO schema_migrations(version) VALUES (?)", (version,))


def _migration_files() -> Sequence[Path]:
    migrations_dir = Path(__file__).resolve().parents[1] / "migrations"
    migrations_dir.mkdir(parents=True, exist_ok=True)
    files = sorted([p for p in migrations_dir.iterdir() if p.suffix == ".sql"])
    return files


def run_migrations(path: Optional[Path] = None) -> None:
    """Run pending SQL migrations found in backend/migrations/*.sql in sorted order."""
    with get_connection(path) as conn:
        applied = _get_applied_versions(conn)
        for sql_file in _migration_files():
            version = sql_file.stem
            if version in applied:
                continue
            conn.executescript(sql_file.read_text(encoding="utf-8"))
            _record_applied(conn, version)


def init_db(path: Optional[Path] = None) -> None:
    """Initialize database by running migrations. Safe to call multiple times."""
    run_migrations(path)


# --- Competition store ---
# Records are kept as JSON payloads; `seq` preserves list order (highest first).

def _row_to_record(row: sqlite3.Row) -> Dict[str, Any]:
    return json.loads(row["payload"])


def load_competitions() -> List[Dict[str, Any]]:
    """Return all stored competitions, newest first."""
    with get_connection() as conn:
        cur = conn.execute("SELECT payload FROM competitions ORDER BY seq DESC")
        return [_row_to_record(r) for r in cur.fetchall()]


def save_competitions(competitions: List[Dict[str, Any]]) -> None:
    """Replace the stored list, keeping the given order."""
    with get_connection() as conn:
        conn.execute("DELETE FROM competitions")
        for record in reversed(competitions):
            conn.execute(
                "INSERT OR REPLACE INTO competitions(id, payload) VALUES(?, ?)",
                (int(record["id"]), json.dumps(record, ensure_ascii=False)),
            )


def add_competition(record: Dict[str, Any]) -> None:
    """Prepend a competition to the stored list."""
    with get_connection() as conn:
        conn.execute("DELETE FROM competitions WHERE id = ?", (int(record["id"]),))
        conn.execute(
            "INSERT INTO competitions(id, payload) VALUES(?, ?)",
            (int(record["id"]), json.dumps(record, ensure_ascii=False)),
        )


def get_competition(competition_id: int) -> Optional[Dict[str, Any]]:
    with get_connection() as conn:
        cur = conn.execute("SELECT payload FROM competitions WHERE id = ?", (competition_id,))
        row = cur.fetchone()
        return _row_to_record(row) if row else None


def delete_competition(competition_id: int) -> bool:
    with get_connection() as conn:
        cur = conn.execute("DELETE FROM competitions WHERE id = ?", (competition_id,))
        return cur.rowcount > 0
