"""
Pydantic schemas for Lead API requests/responses.
"""

from typing import Optional
from pydantic import Field, EmailStr
from app.schemas.base import CamelModel


class LeadBase(CamelModel):
    """Fields shared by lead requests and responses."""
    nome: str = Field(..., min_length=1, max_length=200)
    telefone: Optional[str] = None
    cpf: Optional[str] = Field(None, description="National ID (CPF), not unique")


class LeadCreate(LeadBase):
    """Schema for creating or replacing a lead"""
    email: Optional[EmailStr] = None


class LeadResponse(LeadBase):
    id: int
    email: Optional[str] = None
