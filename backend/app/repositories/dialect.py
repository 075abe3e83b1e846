from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession


# Dialects offering INSERT ... ON CONFLICT
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class UnsupportedDatabaseError(RuntimeError):
    """DATABASE_URL points at a database without INSERT ... ON CONFLICT"""


def upsert_insert(db: AsyncSession, table):
    """Build an INSERT supporting on_conflict_do_update/do_nothing for the session's dialect"""
    dialect = db.get_bind().dialect.name
    try:
        insert = _UPSERT_INSERTS[dialect]
    except KeyError:
        supported = ", ".join(sorted(_UPSERT_INSERTS))
        raise UnsupportedDatabaseError(
            f"Database dialect {dialect!r} is not supported, configure DATABASE_URL for one of: {supported}"
        ) from None
    return insert(table)
