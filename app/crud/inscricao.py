"""
CRUD operations for the Inscricao (enrollment) model.

Every enrollment returned here has its lead, offer and selection process
loaded in the same query. Each mutating function commits before returning.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from app.models.inscricao import Inscricao
from app.models.lead import Lead
from app.models.oferta import Oferta
from app.schemas.inscricao import InscricaoCreate, InscricaoUpdate

logger = logging.getLogger(__name__)

# Fields overwritten by update(); id is never reassigned
_REPLACEABLE_FIELDS = (
    "numero_inscricao",
    "data",
    "status",
    "lead_id",
    "processo_seletivo_id",
    "oferta_id",
)


def _query_with_relations(db: Session):
    return db.query(Inscricao).options(
        joinedload(Inscricao.lead),
        joinedload(Inscricao.oferta),
        joinedload(Inscricao.processo_seletivo),
    )


def get_all(db: Session) -> List[Inscricao]:
    """
    Retrieve every enrollment, ordered by id.

    Returns:
        List of Inscricao instances (possibly empty)
    """
    return _query_with_relations(db).order_by(Inscricao.id).all()


def get_by_id(db: Session, inscricao_id: int) -> Optional[Inscricao]:
    """
    Retrieve an enrollment by its ID.

    Args:
        db: Database session
        inscricao_id: Enrollment ID to retrieve

    Returns:
        Inscricao instance if found, None otherwise
    """
    return _query_with_relations(db).filter(Inscricao.id == inscricao_id).first()


def add(db: Session, data: InscricaoCreate) -> Inscricao:
    """
    Insert a new enrollment. The database assigns the id.

    Foreign-key existence is left to the database.

    Returns:
        Created Inscricao with id and relations loaded
    """
    db_inscricao = Inscricao(**data.model_dump(include=set(_REPLACEABLE_FIELDS)))

    db.add(db_inscricao)
    db.commit()

    logger.info(f"Created enrollment {db_inscricao.id}")
    return get_by_id(db, db_inscricao.id)


def update(db: Session, inscricao_id: int, data: InscricaoUpdate) -> Optional[Inscricao]:
    """
    Replace every scalar and foreign-key field of an existing enrollment.

    Args:
        db: Database session
        inscricao_id: Enrollment ID to update
        data: New field values

    Returns:
        Updated Inscricao if found, None otherwise (nothing is written)
    """
    inscricao = db.query(Inscricao).filter(Inscricao.id == inscricao_id).first()
    if not inscricao:
        return None

    for field in _REPLACEABLE_FIELDS:
        setattr(inscricao, field, getattr(data, field))

    db.commit()

    logger.info(f"Updated enrollment {inscricao_id}")
    return get_by_id(db, inscricao_id)


def delete(db: Session, inscricao_id: int) -> bool:
    """
    Delete an enrollment by ID.

    Returns:
        True if deleted, False if not found
    """
    inscricao = db.query(Inscricao).filter(Inscricao.id == inscricao_id).first()
    if not inscricao:
        return False

    db.delete(inscricao)
    db.commit()

    logger.info(f"Deleted enrollment {inscricao_id}")
    return True


def get_by_national_id(db: Session, cpf: str) -> List[Inscricao]:
    """
    Retrieve all enrollments whose lead has the given CPF.
    """
    return (
        _query_with_relations(db)
        .join(Lead, Inscricao.lead_id == Lead.id)
        .filter(Lead.cpf == cpf)
        .order_by(Inscricao.id)
        .all()
    )


def get_by_offer(db: Session, nome: str) -> List[Inscricao]:
    """
    Retrieve all enrollments whose offer is named `nome` (exact match).
    """
    return (
        _query_with_relations(db)
        .join(Oferta, Inscricao.oferta_id == Oferta.id)
        .filter(Oferta.nome == nome)
        .order_by(Inscricao.id)
        .all()
    )
