from sqlalchemy import Column, Integer, String, Text
from app.core.database import Base


class Oferta(Base):
    """
    A course offering with a seat capacity.

    vagas_disponiveis is informational; enrollments do not decrement it.
    """
    __tablename__ = "ofertas"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String, nullable=False, index=True)
    descricao = Column(Text, nullable=True)
    vagas_disponiveis = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Oferta(id={self.id}, nome='{self.nome}', vagas={self.vagas_disponiveis})>"
