# crud/upsert.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from growth_tracker.core.exceptions import ServiceError


def dialect_insert(db: Session, model: type):
    """
    Return a dialect-specific INSERT construct supporting ON CONFLICT.

    Only PostgreSQL and SQLite are supported: every write to a keyed row
    has to be a single atomic statement.
    """
    bind = db.get_bind()
    dialect_name = bind.dialect.name if bind is not None else ""

    if dialect_name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert as pg_insert

        return pg_insert(model)

    if dialect_name == "sqlite":
        from sqlalchemy.dialects.sqlite import insert as sqlite_insert

        return sqlite_insert(model)

    raise ServiceError(f"Atomic upsert is not supported on dialect '{dialect_name}'")


def upsert(
    db: Session,
    model: type,
    values: Dict[str, Any],
    index_elements: List[str],
    update_fields: List[str],
):
    """
    Perform INSERT ... ON CONFLICT DO UPDATE and return the resulting ORM row.

    Args:
        db: Database session
        model: The SQLAlchemy model class
        values: Column name -> value for the insert
        index_elements: Column names that form the unique constraint
        update_fields: Column names overwritten on conflict

    Returns:
        The inserted or updated instance (not committed)
    """
    stmt = dialect_insert(db, model).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=index_elements,
        set_={field: stmt.excluded[field] for field in update_fields},
    )
    return db.scalars(
        stmt.returning(model),
        execution_options={"populate_existing": True},
    ).one()
