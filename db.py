# db.py

from sqlalchemy import create_engine, Column, Integer, Float, String, DateTime, ForeignKey
from sqlalchemy.orm import sessionmaker, declarative_base, relationship
from datetime import datetime
from config import DATABASE_URL
from readings import latest_values

Base = declarative_base()

class Aquarium(Base):
    __tablename__ = "aquariums"
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer)
    name = Column(String)
    volume = Column(Float)
    main_type = Column(String, nullable=True)   # marine | freshwater
    type = Column(String, nullable=True)        # legacy free-text type ("морской", "fresh"...)
    sub_type = Column(String, nullable=True)    # key into parameters.RANGES
    image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    measurements = relationship(
        "Measurement", back_populates="aquarium", cascade="all, delete-orphan"
    )

class Measurement(Base):
    __tablename__ = "measurements"
    id = Column(Integer, primary_key=True)
    aquarium_id = Column(Integer, ForeignKey("aquariums.id"))
    param = Column(String)           # parameter key: kh, no3, ph...
    value = Column(Float)
    created_at = Column(DateTime, default=datetime.utcnow)
    comment = Column(String, default="")
    aquarium = relationship("Aquarium", back_populates="measurements")


def aquarium_record(aq: Aquarium) -> dict:
    """Row -> the dict shape the classifier and evaluator understand."""
    return {
        "id": aq.id,
        "name": aq.name,
        "volume": aq.volume,
        "mainType": aq.main_type,
        "type": aq.type,
        "subType": aq.sub_type,
        "imageUrl": aq.image_url,
    }


def latest_parameters(session, aquarium_id) -> dict:
    rows = (
        session.query(Measurement)
        .filter(Measurement.aquarium_id == aquarium_id)
        .order_by(Measurement.created_at, Measurement.id)
        .all()
    )
    return latest_values(rows)


def recent_measurements(session, aquarium_id, limit=10):
    """Newest first."""
    return (
        session.query(Measurement)
        .filter(Measurement.aquarium_id == aquarium_id)
        .order_by(Measurement.created_at.desc(), Measurement.id.desc())
        .limit(limit)
        .all()
    )


def delete_measurement(session, aquarium_id, measurement_id) -> bool:
    """Delete one reading of the given aquarium. False when there is no such reading."""
    m = session.get(Measurement, measurement_id)
    if m is None or m.aquarium_id != aquarium_id:
        return False
    session.delete(m)
    session.commit()
    return True


def make_engine(url=DATABASE_URL):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def init_db(bind=None):
    Base.metadata.create_all(bind or engine)


engine = make_engine()
Session = sessionmaker(bind=engine)
