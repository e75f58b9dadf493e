"""
Parcel Status Enumeration.
"""

import enum
from typing import Optional


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.
    
    Status flow:
        REGISTERED → SENT → DELIVERED
    
    Only REGISTERED matters to the store: address changes and deletion
    are allowed while a parcel is registered. Any other string is stored as-is.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"
    
    @classmethod
    def parse(cls, value: str) -> Optional["ParcelStatus"]:
        """Return the matching member, or None for statuses this layer does not know."""
        try:
            return cls(value)
        except ValueError:
            return None


_NEXT_STATUS = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
}


def next_status(value: str) -> Optional[ParcelStatus]:
    """
    Next step in the delivery flow.
    
    Returns None for DELIVERED (final) and for unknown statuses.
    """
    current = ParcelStatus.parse(value)
    if current is None:
        return None
    return _NEXT_STATUS.get(current)
