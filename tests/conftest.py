"""
Shared fixtures: default catalogs and an in-memory database.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import db
from parameters import RangeCatalog
from recommendations import RecommendationCatalog
from status import StatusEvaluator


@pytest.fixture
def ranges():
    return RangeCatalog()


@pytest.fixture
def advice_en():
    return RecommendationCatalog.for_language("en")


@pytest.fixture
def evaluator(ranges, advice_en):
    return StatusEvaluator(ranges, advice_en)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db.init_db(engine)
    yield sessionmaker(bind=engine)
    engine.dispose()


@pytest.fixture
def make_aquarium(session_factory):
    """Insert an aquarium with optional readings [(key, value, created_at), ...]."""

    def _make(sub_type="sps", main_type="marine", readings=(), **fields):
        with session_factory() as session:
            aq = db.Aquarium(
                user_id=fields.pop("user_id", 1),
                name=fields.pop("name", "Reef"),
                volume=fields.pop("volume", 200),
                main_type=main_type,
                sub_type=sub_type,
                **fields,
            )
            session.add(aq)
            session.flush()
            for key, value, created_at in readings:
                session.add(db.Measurement(aquarium_id=aq.id, param=key, value=value, created_at=created_at))
            session.commit()
            return aq.id

    return _make
