"""Block until the players database accepts connections (container start-up)."""
import os
import sys
import time

import psycopg
from psycopg.conninfo import make_conninfo


def env(name, default=None):
    value = os.getenv(name, default)
    if value is None:
        raise RuntimeError(f"Missing required env var: {name}")
    return value


def conninfo():
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url
    return make_conninfo(
        dbname=env("POSTGRES_DB", "players"),
        user=env("POSTGRES_USER", "players"),
        password=env("POSTGRES_PASSWORD", "players"),
        host=env("POSTGRES_HOST", "db"),
        port=env("POSTGRES_PORT", "5432"),
    )


def main():
    retries = int(os.getenv("DB_CONNECT_RETRIES", "30"))
    delay = float(os.getenv("DB_CONNECT_DELAY", "1"))
    dsn = conninfo()

    for attempt in range(1, retries + 1):
        try:
            with psycopg.connect(dsn, connect_timeout=5) as conn:
                conn.execute("SELECT 1")
            return 0
        except psycopg.Error as exc:
            print(f"database not ready ({attempt}/{retries}): {exc}", file=sys.stderr)
            if attempt == retries:
                break
            time.sleep(delay)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
