"""
Address model

Shipping address as seen by delivery modules: location fields plus the
country/state it resolves to.
"""
from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship

from delivery_postage.core.database import Base


class Address(Base):
    __tablename__ = "addresses"
    __table_args__ = (
        Index("ix_addresses_country_id", "country_id"),
        Index("ix_addresses_zip_code", "zip_code"),
    )

    id = Column(Integer, primary_key=True, index=True)
    label = Column(String(100), nullable=True)

    # Recipient
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    company = Column(String(100), nullable=True)

    # Location
    address_line1 = Column(String(255), nullable=False)
    address_line2 = Column(String(255), nullable=True)
    city = Column(String(100), nullable=False)
    zip_code = Column(String(20), nullable=False)
    country_id = Column(Integer, ForeignKey("countries.id"), nullable=False)
    state_id = Column(Integer, ForeignKey("states.id"), nullable=True)

    country = relationship("Country")
    state = relationship("State")

    def __repr__(self):
        return f"<Address(id={self.id}, city={self.city}, zip_code={self.zip_code})>"
