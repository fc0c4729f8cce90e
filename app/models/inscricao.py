"""
Enrollment (inscricao) database model.

An enrollment ties one lead to one selection process and one offer.
Relationships are one-directional: Lead, Oferta and ProcessoSeletivo
carry no collection of enrollments.
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base


class Inscricao(Base):
    """
    A lead's application to a selection process for a given offer.

    numero_inscricao is a business number distinct from the primary key;
    status is free-form text.
    """
    __tablename__ = "inscricoes"

    id = Column(Integer, primary_key=True, index=True)
    numero_inscricao = Column(Integer, nullable=False)
    data = Column(DateTime(timezone=True), nullable=False)
    status = Column(String, nullable=True)

    # Foreign keys
    lead_id = Column(Integer, ForeignKey("leads.id"), nullable=False, index=True)
    processo_seletivo_id = Column(Integer, ForeignKey("processos_seletivos.id"), nullable=False, index=True)
    oferta_id = Column(Integer, ForeignKey("ofertas.id"), nullable=False, index=True)

    # Relationships
    lead = relationship("Lead")
    processo_seletivo = relationship("ProcessoSeletivo")
    oferta = relationship("Oferta")

    def __repr__(self):
        return f"<Inscricao(id={self.id}, numero={self.numero_inscricao}, status='{self.status}')>"
