"""
Parcel database model.

A single table, ``parcel``, keyed by an auto-assigned number.
"""

from sqlalchemy import Column, Integer, String
from parcel_tracker.app.db.session import Base


class Parcel(Base):
    """
    Parcel model for the tracker.
    
    Status is a plain string column; the registered/sent/delivered
    vocabulary lives in ParcelStatus and is not enforced by the database.
    """
    __tablename__ = "parcel"
    
    number = Column(Integer, primary_key=True, autoincrement=True)
    
    # Ownership
    client = Column(Integer, nullable=False, index=True)
    
    # State
    status = Column(String, nullable=False)
    address = Column(String, nullable=False)
    
    # ISO-8601 timestamp, stored as text
    created_at = Column(String, nullable=False)
    
    def __repr__(self):
        return f"<Parcel(number={self.number}, client={self.client}, status='{self.status}')>"
