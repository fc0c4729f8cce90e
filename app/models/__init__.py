"""
Database models package.
"""

from app.models.processo_seletivo import ProcessoSeletivo
from app.models.lead import Lead
from app.models.oferta import Oferta
from app.models.inscricao import Inscricao

__all__ = ["ProcessoSeletivo", "Lead", "Oferta", "Inscricao"]
