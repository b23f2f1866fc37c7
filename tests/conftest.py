"""
Pytest configuration and shared fixtures
"""

import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Keep tests off any developer database (must be set before src.config is imported)
os.environ["DATABASE_URL"] = "sqlite://"

from src.database import Base, get_db
from src.main import app
from src.models import TrainLine, Station
from src.network import StationRecord, build_network_graph


def make_records(lines, interchange_flags=()):
    """Build station records from (line_id, line_name, [station names]) tuples"""
    records = []
    for line_id, line_name, stations in lines:
        for position, name in enumerate(stations):
            records.append(StationRecord(
                station_name=name,
                line_id=line_id,
                line_name=line_name,
                position=position,
                is_interchange=name in interchange_flags,
            ))
    return records


# A-B-C on Line1 and C-D-E on Line2 share interchange C; Line3 is isolated
REFERENCE_LINES = [
    (1, "Line1", ["A", "B", "C"]),
    (2, "Line2", ["C", "D", "E"]),
    (3, "Line3", ["F", "G"]),
]

# Ten stations, four lines, several loops
MESH_LINES = [
    (1, "L1", ["A", "B", "C", "D", "E"]),
    (2, "L2", ["F", "C", "G", "H"]),
    (3, "L3", ["A", "F", "H", "I"]),
    (4, "L4", ["E", "I", "J"]),
]


@pytest.fixture
def graph_factory():
    """Build a graph from (line_id, line_name, [station names]) tuples"""
    def _build(lines, interchange_flags=()):
        return build_network_graph(make_records(lines, interchange_flags))
    return _build


@pytest.fixture
def reference_records():
    return make_records(REFERENCE_LINES)


@pytest.fixture
def reference_graph(reference_records):
    return build_network_graph(reference_records)


@pytest.fixture
def mesh_graph():
    return build_network_graph(make_records(MESH_LINES))


@pytest.fixture
def db_session():
    """In-memory SQLite session with the metro schema"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def seeded_db(db_session):
    """Reference network stored the way the seed script stores it"""
    for line_id, line_name, stations in REFERENCE_LINES:
        line = TrainLine(id=line_id, name=line_name, color="grey")
        db_session.add(line)
        db_session.flush()
        for position, name in enumerate(stations):
            db_session.add(Station(
                line_id=line.id,
                name=name,
                position=position,
                is_interchange=name == "C",
            ))
    db_session.commit()
    return db_session


@pytest.fixture
def client(seeded_db):
    """TestClient with the database dependency pointed at the seeded session"""
    def override_get_db():
        yield seeded_db

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
