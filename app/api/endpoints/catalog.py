"""
Endpoints for the entities enrollments point to: leads, offers and
selection processes.

The three routers share the same shape, so they are built by one factory.
"""

import logging
from typing import List, Type
from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import Base, get_db
from app.crud import base as crud
from app.models.lead import Lead
from app.models.oferta import Oferta
from app.models.processo_seletivo import ProcessoSeletivo
from app.schemas.lead import LeadCreate, LeadResponse
from app.schemas.oferta import OfertaCreate, OfertaResponse
from app.schemas.processo_seletivo import ProcessoSeletivoCreate, ProcessoSeletivoResponse

logger = logging.getLogger(__name__)


def build_router(
    model: Type[Base],
    create_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    prefix: str,
    label: str,
) -> APIRouter:
    """
    Build list/get/create/replace/delete routes for a catalogue model.

    Args:
        model: SQLAlchemy model class
        create_schema: Schema used for POST and PUT bodies
        response_schema: Schema used for responses
        prefix: URL prefix, e.g. "/leads"
        label: Human-readable name used in error messages
    """
    router = APIRouter(prefix=prefix, tags=[label])
    not_found = f"{label} not found"

    @router.get("", response_model=List[response_schema])
    def list_items(db: Session = Depends(get_db)):
        return crud.get_multi(db, model)

    @router.get("/{item_id}", response_model=response_schema)
    def get_item(item_id: int, db: Session = Depends(get_db)):
        item = crud.get_by_id(db, model, item_id)
        if not item:
            raise HTTPException(status_code=404, detail=not_found)
        return item

    @router.post("", status_code=201, response_model=response_schema)
    def create_item(request: create_schema, db: Session = Depends(get_db)):
        try:
            return crud.create(db, model, request)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating {label}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to create {label}: {str(e)}")

    @router.put("/{item_id}", response_model=response_schema)
    def update_item(item_id: int, request: create_schema, db: Session = Depends(get_db)):
        try:
            item = crud.update(db, model, item_id, request)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating {label} {item_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update {label}: {str(e)}")

        if not item:
            raise HTTPException(status_code=404, detail=not_found)
        return item

    @router.delete("/{item_id}", status_code=204)
    def delete_item(item_id: int, db: Session = Depends(get_db)):
        if not crud.get_by_id(db, model, item_id):
            raise HTTPException(status_code=404, detail=not_found)

        in_use = crud.count_enrollments(db, model, item_id)
        if in_use:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"{label} is referenced by {in_use} enrollment(s)"
            )

        try:
            crud.delete(db, model, item_id)
        except IntegrityError as e:
            # An enrollment was added after the reference count above
            db.rollback()
            logger.warning(f"Delete of {label} {item_id} blocked by a reference: {e}")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"{label} is referenced by enrollments")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting {label} {item_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to delete {label}: {str(e)}")

        return Response(status_code=204)

    return router


leads_router = build_router(Lead, LeadCreate, LeadResponse, "/leads", "Lead")
ofertas_router = build_router(Oferta, OfertaCreate, OfertaResponse, "/ofertas", "Oferta")
processos_router = build_router(
    ProcessoSeletivo,
    ProcessoSeletivoCreate,
    ProcessoSeletivoResponse,
    "/processos-seletivos",
    "Processo seletivo",
)
