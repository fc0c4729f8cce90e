from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Lead(Base):
    """
    A prospective applicant's contact record.

    The CPF (national ID) is indexed for lookups but not unique.
    """
    __tablename__ = "leads"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String, nullable=False)
    email = Column(String, nullable=True)
    telefone = Column(String, nullable=True)
    cpf = Column(String, nullable=True, index=True)

    def __repr__(self):
        return f"<Lead(id={self.id}, nome='{self.nome}', cpf='{self.cpf}')>"
