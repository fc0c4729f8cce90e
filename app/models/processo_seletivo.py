from sqlalchemy import Column, Integer, String, DateTime
from app.core.database import Base


class ProcessoSeletivo(Base):
    """
    A selection process: a time-bounded admission cycle.
    """
    __tablename__ = "processos_seletivos"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String, nullable=False)
    data_inicio = Column(DateTime(timezone=True), nullable=False)
    data_termino = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<ProcessoSeletivo(id={self.id}, nome='{self.nome}')>"
