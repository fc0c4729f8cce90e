"""
Generic CRUD operations for the catalogue models (Lead, Oferta, ProcessoSeletivo).

These entities have no relations of their own, so a single set of functions
parameterised by model class covers all three.
"""

import logging
from typing import List, Optional, Type, TypeVar
from pydantic import BaseModel
from sqlalchemy.orm import Session
from app.core.database import Base
from app.models.inscricao import Inscricao

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)

# Column on inscricoes that references each catalogue table
_ENROLLMENT_FK = {
    "leads": Inscricao.lead_id,
    "ofertas": Inscricao.oferta_id,
    "processos_seletivos": Inscricao.processo_seletivo_id,
}


def get_multi(db: Session, model: Type[ModelType]) -> List[ModelType]:
    return db.query(model).order_by(model.id).all()


def get_by_id(db: Session, model: Type[ModelType], obj_id: int) -> Optional[ModelType]:
    return db.query(model).filter(model.id == obj_id).first()


def create(db: Session, model: Type[ModelType], data: BaseModel) -> ModelType:
    """
    Insert a new row built from a validated schema.

    Returns:
        Created instance with id
    """
    db_obj = model(**data.model_dump())

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(f"Created {model.__tablename__} {db_obj.id}")
    return db_obj


def update(db: Session, model: Type[ModelType], obj_id: int, data: BaseModel) -> Optional[ModelType]:
    """
    Overwrite all fields of an existing row.

    Returns:
        Updated instance if found, None otherwise
    """
    db_obj = get_by_id(db, model, obj_id)
    if not db_obj:
        return None

    for field, value in data.model_dump().items():
        setattr(db_obj, field, value)

    db.commit()
    db.refresh(db_obj)

    logger.info(f"Updated {model.__tablename__} {obj_id}")
    return db_obj


def count_enrollments(db: Session, model: Type[ModelType], obj_id: int) -> int:
    """
    Count enrollments referencing a catalogue row.
    """
    fk_column = _ENROLLMENT_FK[model.__tablename__]
    return db.query(Inscricao).filter(fk_column == obj_id).count()


def delete(db: Session, model: Type[ModelType], obj_id: int) -> bool:
    """
    Delete a row by ID.

    Returns:
        True if deleted, False if not found
    """
    db_obj = get_by_id(db, model, obj_id)
    if not db_obj:
        return False

    db.delete(db_obj)
    db.commit()

    logger.info(f"Deleted {model.__tablename__} {obj_id}")
    return True
