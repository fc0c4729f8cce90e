"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Seeded leads, offers and selection processes
"""

import os
from datetime import datetime

# Point the named connection at SQLite before the app builds its engine
os.environ.setdefault("VestibularDB", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.models import Inscricao, Lead, Oferta, ProcessoSeletivo
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def lead(db_session):
    """Lead Ana with CPF 123"""
    lead = Lead(nome="Ana", email="a@x.com", telefone="111", cpf="123")
    db_session.add(lead)
    db_session.commit()
    return lead


@pytest.fixture
def other_lead(db_session):
    lead = Lead(nome="Bruno", email="b@x.com", telefone="222", cpf="456")
    db_session.add(lead)
    db_session.commit()
    return lead


@pytest.fixture
def processo(db_session):
    processo = ProcessoSeletivo(
        nome="Vestibular 2027",
        data_inicio=datetime(2026, 11, 1),
        data_termino=datetime(2026, 12, 15),
    )
    db_session.add(processo)
    db_session.commit()
    return processo


@pytest.fixture
def oferta(db_session):
    oferta = Oferta(nome="Engenharia", descricao="Engenharia Civil - noturno", vagas_disponiveis=40)
    db_session.add(oferta)
    db_session.commit()
    return oferta


@pytest.fixture
def other_oferta(db_session):
    oferta = Oferta(nome="Medicina", descricao="Medicina - integral", vagas_disponiveis=60)
    db_session.add(oferta)
    db_session.commit()
    return oferta


@pytest.fixture
def sample_inscricao_data(lead, processo, oferta):
    """Enrollment payload (camelCase, as sent by clients) for the seeded entities"""
    return {
        "numeroInscricao": 1001,
        "data": "2026-11-05T09:30:00",
        "status": "PENDENTE",
        "leadId": lead.id,
        "processoSeletivoId": processo.id,
        "ofertaId": oferta.id,
    }


@pytest.fixture
def make_inscricao(db_session, processo):
    """Factory inserting an enrollment directly through the session"""
    def _make(lead, oferta, numero=1, status="PENDENTE"):
        inscricao = Inscricao(
            numero_inscricao=numero,
            data=datetime(2026, 11, 5, 9, 30),
            status=status,
            lead_id=lead.id,
            processo_seletivo_id=processo.id,
            oferta_id=oferta.id,
        )
        db_session.add(inscricao)
        db_session.commit()
        return inscricao

    return _make
