"""
Parcel service.

Registers parcels and walks them through the delivery flow
(registered → sent → delivered) on top of ParcelStore.
"""

import logging
from typing import List, Optional

from parcel_tracker.app.models.parcel_enums import ParcelStatus, next_status
from parcel_tracker.app.schemas.parcel import ParcelCreate, ParcelRead
from parcel_tracker.app.services.parcel_store import ParcelStore

logger = logging.getLogger(__name__)


class ParcelService:

    def __init__(self, store: ParcelStore):
        self.store = store

    async def register(self, client: int, address: str) -> ParcelRead:
        """
        Register a new parcel for a client.

        Args:
            client: Owning client identifier
            address: Delivery address

        Returns:
            The stored parcel, including its assigned number
        """
        parcel = ParcelCreate(
            client=client,
            status=ParcelStatus.REGISTERED.value,
            address=address,
        )
        number = await self.store.add(parcel)

        logger.info(
            "New parcel %s registered for client %s, address %s, created at %s",
            number, client, address, parcel.created_at
        )
        return ParcelRead(number=number, **parcel.model_dump())

    async def client_parcels(self, client: int) -> List[ParcelRead]:
        return await self.store.get_by_client(client)

    async def next_status(self, number: int) -> Optional[str]:
        """
        Advance a parcel one step along the delivery flow.

        Returns:
            The new status, or None when the parcel is delivered already
            or has a status outside the flow (nothing is written then)

        Raises:
            NotFoundError: If the parcel does not exist
        """
        parcel = await self.store.get(number)

        following = next_status(parcel.status)
        if following is None:
            logger.info("Parcel %s has no next status after '%s'", number, parcel.status)
            return None

        await self.store.set_status(number, following.value)
        logger.info("Parcel %s status changed: %s -> %s", number, parcel.status, following.value)
        return following.value

    async def change_address(self, number: int, address: str) -> None:
        # Silently ignored unless the parcel is registered
        await self.store.set_address(number, address)

    async def delete(self, number: int) -> None:
        await self.store.delete(number)
