"""
Country and State models

Only attribute and relationship behaviour is relied on by the postage
request; persistence is the host application's concern.
"""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship

from delivery_postage.core.database import Base


class Country(Base):
    __tablename__ = "countries"

    id = Column(Integer, primary_key=True, index=True)
    iso_alpha2 = Column(String(2), nullable=False, unique=True)  # ISO 3166-1 alpha-2
    iso_alpha3 = Column(String(3), nullable=True)
    title = Column(String(100), nullable=False)
    has_states = Column(Boolean, default=False, nullable=False)

    states = relationship("State", back_populates="country")

    def __repr__(self):
        return f"<Country(id={self.id}, iso_alpha2={self.iso_alpha2})>"


class State(Base):
    """Administrative region of a country (US state, Canadian province...)."""
    __tablename__ = "states"
    __table_args__ = (
        Index("ix_states_country_iso", "country_id", "iso_code"),
    )

    id = Column(Integer, primary_key=True, index=True)
    country_id = Column(Integer, ForeignKey("countries.id", ondelete="CASCADE"), nullable=False, index=True)
    iso_code = Column(String(10), nullable=False)
    title = Column(String(100), nullable=False)

    country = relationship("Country", back_populates="states")

    def __repr__(self):
        return f"<State(id={self.id}, iso_code={self.iso_code})>"
