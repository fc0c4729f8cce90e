"""
Enrollment (inscricao) endpoints.

Mounted under /api/inscricoes. Creation answers 200 with the stored record.
Update/delete of a missing id answer 404 unless STRICT_NOT_FOUND is
disabled, in which case they answer 200 and do nothing.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.crud import inscricao as inscricao_crud
from app.schemas.inscricao import InscricaoCreate, InscricaoResponse, InscricaoUpdate

router = APIRouter(prefix="/inscricoes", tags=["Inscricoes"])
logger = logging.getLogger(__name__)

INVALID_DATA = "Dados inválidos."
NOT_FOUND = "Inscrição não encontrada"


@router.get("", response_model=List[InscricaoResponse])
def list_inscricoes(db: Session = Depends(get_db)):
    """
    List all enrollments with lead, offer and selection process.
    """
    return inscricao_crud.get_all(db)


@router.get("/cpf/{cpf}", response_model=List[InscricaoResponse])
def list_inscricoes_by_cpf(cpf: str, db: Session = Depends(get_db)):
    """
    List enrollments whose lead has the given CPF. Empty list when none match.
    """
    return inscricao_crud.get_by_national_id(db, cpf)


@router.get("/oferta/{oferta}", response_model=List[InscricaoResponse])
def list_inscricoes_by_oferta(oferta: str, db: Session = Depends(get_db)):
    """
    List enrollments for the offer with the given name.
    """
    return inscricao_crud.get_by_offer(db, oferta)


@router.get("/{inscricao_id}", response_model=InscricaoResponse)
def get_inscricao(inscricao_id: int, db: Session = Depends(get_db)):
    inscricao = inscricao_crud.get_by_id(db, inscricao_id)

    if not inscricao:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    return inscricao


@router.post("", response_model=InscricaoResponse)
def create_inscricao(
    inscricao: Optional[InscricaoCreate] = Body(None),
    db: Session = Depends(get_db)
):
    """
    Create an enrollment. The id is assigned by the database.

    Returns 200 (not 201) with the stored record, or 400 when the body is absent.
    """
    if inscricao is None:
        raise HTTPException(status_code=400, detail=INVALID_DATA)

    try:
        return inscricao_crud.add(db, inscricao)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating enrollment: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create enrollment: {str(e)}")


@router.put("/{inscricao_id}", response_model=InscricaoResponse)
def update_inscricao(
    inscricao_id: int,
    inscricao: Optional[InscricaoUpdate] = Body(None),
    db: Session = Depends(get_db)
):
    """
    Replace an enrollment.

    The body id must equal the path id (400 otherwise). When the enrollment
    does not exist the answer is 404, or in legacy mode 200 echoing the body.
    """
    if inscricao is None or inscricao.id != inscricao_id:
        raise HTTPException(status_code=400, detail=INVALID_DATA)

    try:
        updated = inscricao_crud.update(db, inscricao_id, inscricao)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating enrollment {inscricao_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to update enrollment: {str(e)}")

    if updated is None:
        if settings.STRICT_NOT_FOUND:
            raise HTTPException(status_code=404, detail=NOT_FOUND)
        logger.warning(f"Update of missing enrollment {inscricao_id} ignored")
        return InscricaoResponse.model_validate(inscricao.model_dump())

    return updated


@router.delete("/{inscricao_id}", status_code=status.HTTP_200_OK)
def delete_inscricao(inscricao_id: int, db: Session = Depends(get_db)):
    try:
        deleted = inscricao_crud.delete(db, inscricao_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting enrollment {inscricao_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to delete enrollment: {str(e)}")

    if not deleted:
        if settings.STRICT_NOT_FOUND:
            raise HTTPException(status_code=404, detail=NOT_FOUND)
        logger.warning(f"Delete of missing enrollment {inscricao_id} ignored")

    return Response(status_code=status.HTTP_200_OK)
