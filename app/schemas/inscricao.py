"""
Pydantic schemas for enrollment (inscricao) API requests/responses.

Wire names are camelCase: numeroInscricao, leadId, processoSeletivoId, ofertaId.
"""

from typing import Optional
from pydantic import Field
from app.schemas.base import CamelModel, UtcDateTime
from app.schemas.lead import LeadResponse
from app.schemas.oferta import OfertaResponse
from app.schemas.processo_seletivo import ProcessoSeletivoResponse


class InscricaoBase(CamelModel):
    """Scalar and foreign-key fields of an enrollment."""
    numero_inscricao: int = Field(..., description="Enrollment number, distinct from id")
    data: UtcDateTime
    status: Optional[str] = Field(None, description="Free-form status text")
    lead_id: int
    processo_seletivo_id: int
    oferta_id: int


class InscricaoCreate(InscricaoBase):
    """Schema for creating an enrollment. A client-supplied id is ignored."""
    id: Optional[int] = None


class InscricaoUpdate(InscricaoBase):
    """
    Schema for replacing an enrollment.

    id must match the path id; a missing id counts as a mismatch.
    """
    id: Optional[int] = None


class InscricaoResponse(InscricaoBase):
    """Enrollment with its lead, offer and selection process."""
    id: int
    lead: Optional[LeadResponse] = None
    oferta: Optional[OfertaResponse] = None
    processo_seletivo: Optional[ProcessoSeletivoResponse] = None
