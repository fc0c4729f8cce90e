from typing import Optional
from pydantic import Field
from app.schemas.base import CamelModel


class OfertaBase(CamelModel):
    nome: str = Field(..., min_length=1, max_length=200)
    descricao: Optional[str] = None
    vagas_disponiveis: int = Field(0, ge=0, description="Seats on offer (not decremented by enrollments)")


class OfertaCreate(OfertaBase):
    """Schema for creating or replacing an offer"""


class OfertaResponse(OfertaBase):
    id: int
