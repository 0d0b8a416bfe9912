from typing import Iterable, Optional
from sqlalchemy import func, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from gardens import models, schemas

# ---------- tiny, single-purpose helpers ----------

def _column_values(payload: schemas.GardenIn) -> dict:
    # full replace: every non-id column is written, defaults included
    return {f: getattr(payload, f) for f in models.GARDEN_FIELDS}

def _rows_for_insert(rows: Iterable[dict]) -> list[dict]:
    return [{f: r[f] for f in models.GARDEN_FIELDS} for r in rows]

# ---------- queries ----------

def list_gardens(db: Session) -> list[models.Garden]:
    return db.query(models.Garden).order_by(models.Garden.id).all()

def get_garden(db: Session, garden_id: int) -> Optional[models.Garden]:
    return db.get(models.Garden, garden_id)

def count_gardens(db: Session) -> int:
    return db.query(func.count(models.Garden.id)).scalar() or 0

# ---------- writes ----------

def create_garden(db: Session, payload: schemas.GardenIn) -> Optional[models.Garden]:
    """
    Insert one row, then read it back by its generated id.
    Returns: the stored row (None only if it vanished before the read-back)
    """
    obj = models.Garden(**_column_values(payload))
    db.add(obj)
    db.commit()
    new_id = obj.id
    db.expire_all()
    return db.get(models.Garden, new_id)

def update_garden(db: Session, garden_id: int, payload: schemas.GardenIn) -> Optional[models.Garden]:
    """
    Overwrite all 15 non-id columns of one row, then read it back.
    Returns: the updated row, or None when no row has `garden_id`
    """
    (
        db.query(models.Garden)
        .filter(models.Garden.id == garden_id)
        .update(_column_values(payload), synchronize_session=False)
    )
    db.commit()
    db.expire_all()
    return db.get(models.Garden, garden_id)

def delete_garden(db: Session, garden_id: int) -> int:
    """Returns the number of rows removed (0 or 1)."""
    changes = (
        db.query(models.Garden)
        .filter(models.Garden.id == garden_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return changes

def bulk_insert_gardens(db: Session, rows: Iterable[dict]) -> tuple[int, list[tuple[int, str]]]:
    """
    One INSERT statement reused for every row, each row committed on its own.
    A failing row is rolled back and skipped; rows before and after it are kept.
    Returns: (inserted_count, [(row_index, error), ...])
    """
    stmt = insert(models.Garden)
    inserted = 0
    failures: list[tuple[int, str]] = []
    for i, values in enumerate(_rows_for_insert(rows)):
        try:
            db.execute(stmt, values)
            db.commit()
        except (SQLAlchemyError, OverflowError) as e:
            db.rollback()
            failures.append((i, str(e)))
            continue
        inserted += 1
    return inserted, failures
