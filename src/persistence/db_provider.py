"""Implementación PostgreSQL de PersistenceProvider."""

from __future__ import annotations

import importlib
import os
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from .provider import PersistenceProvider, StoreUnavailableError

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DatabasePersistenceProvider(PersistenceProvider):
    """Persistencia transaccional en PostgreSQL (tabla kv_store)."""

    def __init__(self, dsn: str | None = None, run_migrations: bool = True) -> None:
        self._dsn = (dsn or os.getenv("DATABASE_URL", "")).strip()
        if not self._dsn:
            raise RuntimeError("DATABASE_URL no configurada para PERSISTENCE_MODE=db")
        try:
            self._psycopg = importlib.import_module("psycopg")
        except ModuleNotFoundError as exc:
            raise RuntimeError(
                "Falta dependencia 'psycopg'. Instala el driver PostgreSQL para usar PERSISTENCE_MODE=db."
            ) from exc
        if run_migrations:
            self.apply_migrations()

    @contextmanager
    def _connection(self):
        try:
            conn = self._psycopg.connect(self._dsn, autocommit=False)
        except self._psycopg.Error as exc:
            raise StoreUnavailableError(f"PostgreSQL no disponible: {exc}") from exc
        try:
            yield conn
            conn.commit()
        except self._psycopg.Error as exc:
            conn.rollback()
            raise StoreUnavailableError(f"Error de PostgreSQL: {exc}") from exc
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    @staticmethod
    def _split_sql_script(script: str) -> list[str]:
        chunks = []
        current = []
        for line in script.splitlines():
            current.append(line)
            if line.strip().endswith(";"):
                statement = "\n".join(current).strip()
                if statement:
                    chunks.append(statement)
                current = []
        if current:
            statement = "\n".join(current).strip()
            if statement:
                chunks.append(statement)
        return chunks

    def apply_migrations(self) -> None:
        migrations_dir = PROJECT_ROOT / "migrations"
        if not migrations_dir.exists():
            return
        migration_files = sorted(p for p in migrations_dir.glob("*.sql") if p.is_file())
        if not migration_files:
            return
        with self._connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    CREATE TABLE IF NOT EXISTS schema_migrations (
                        version VARCHAR PRIMARY KEY,
                        applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                    );
                    """
                )
                for migration in migration_files:
                    version = migration.name
                    cur.execute("SELECT 1 FROM schema_migrations WHERE version = %s", (version,))
                    if cur.fetchone():
                        continue
                    sql_script = migration.read_text(encoding="utf-8")
                    for statement in self._split_sql_script(sql_script):
                        cur.execute(statement)
                    cur.execute(
                        "INSERT INTO schema_migrations (version, applied_at) VALUES (%s, %s)",
                        (version, _utc_now()),
                    )

    def get(self, key: str) -> str | None:
        with self._connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT value FROM kv_store WHERE key = %s", (key,))
                row = cur.fetchone()
                return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self._connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (%s, %s, %s)
                    ON CONFLICT (key) DO UPDATE SET value = EXCLUDED.value, updated_at = EXCLUDED.updated_at
                    """,
                    (key, value, _utc_now()),
                )

    def remove(self, key: str) -> None:
        with self._connection() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM kv_store WHERE key = %s", (key,))
