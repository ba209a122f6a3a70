"""
Database URL utilities
"""
from typing import Optional

from sqlalchemy.engine import URL


# Async driver used for each base scheme
ASYNC_DRIVERS = {
    "mysql": "mysql+aiomysql",
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
}


def build_mysql_url(user: str, password: str, host: str, name: str) -> Optional[str]:
    """
    Compose the store URL from its parts

    Args:
        user: Database user
        password: Database password
        host: Host, optionally with ":port"
        name: Database name

    Returns:
        mysql+aiomysql URL, or None when no host is configured
    """
    if not host:
        return None

    port = None
    if ":" in host:
        host, _, port_str = host.rpartition(":")
        port = int(port_str)

    url = URL.create(
        "mysql+aiomysql",
        username=user or None,
        password=password or None,
        host=host,
        port=port,
        database=name or None,
        query={"charset": "utf8mb4"},
    )
    return url.render_as_string(hide_password=False)


def build_async_url(sync_url: str) -> str:
    """
    Swap the scheme of a plain database URL for its async driver

    Args:
        sync_url: Original database URL (e.g. mysql://, postgres://, sqlite:///)

    Returns:
        Async-compatible database URL. URLs already naming a driver are kept.
    """
    if not sync_url:
        return sync_url

    scheme, sep, rest = sync_url.partition("://")
    if not sep or "+" in scheme:
        return sync_url

    new_scheme = ASYNC_DRIVERS.get(scheme)
    if new_scheme is None:
        return sync_url

    return f"{new_scheme}://{rest}"


def resolve_database_url(settings) -> Optional[str]:
    """DATABASE_URL wins over the DB_* parts."""
    if settings.DATABASE_URL:
        return build_async_url(settings.DATABASE_URL)
    return build_mysql_url(settings.DB_USER, settings.DB_PASS, settings.DB_HOST, settings.DB_NAME)
