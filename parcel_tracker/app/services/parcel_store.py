"""
Parcel store: data access for the ``parcel`` table.

Every operation is one SQL statement. The registered-status guard for
address changes and deletion is part of the statement's WHERE clause,
so the database checks it atomically against the row it touches.

Not-found is asymmetric on purpose: only ``get`` raises NotFoundError.
``set_status``, ``set_address`` and ``delete`` complete silently when no
row matches or the guard fails; callers that need to know must check
with ``get`` first.
"""

import logging
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from parcel_tracker.app.core.exceptions import NotFoundError, PersistenceError
from parcel_tracker.app.models.parcel import Parcel
from parcel_tracker.app.models.parcel_enums import ParcelStatus
from parcel_tracker.app.schemas.parcel import ParcelCreate, ParcelRead

logger = logging.getLogger(__name__)

# Driver errors SQLAlchemy passes through unwrapped (e.g. out-of-range integers)
_DB_ERRORS = (SQLAlchemyError, OverflowError)

_COLUMNS = (Parcel.number, Parcel.client, Parcel.status, Parcel.address, Parcel.created_at)


class ParcelStore:
    """
    Stateless facade over one database session.

    The session is injected and owned by the caller; the store never
    opens or closes it. With ``autocommit`` (the default) each call is
    committed on its own, otherwise writes are only flushed and the
    caller commits.
    """

    def __init__(self, session: AsyncSession, autocommit: bool = True):
        self._session = session
        self._autocommit = autocommit

    async def add(self, parcel: ParcelCreate) -> int:
        """
        Insert a parcel and return its newly assigned number.

        Any ``number`` already present on the input is ignored.

        Raises:
            PersistenceError: If the insert fails or no number was assigned
        """
        row = Parcel(
            client=parcel.client,
            status=parcel.status,
            address=parcel.address,
            created_at=parcel.created_at,
        )
        try:
            self._session.add(row)
            await self._session.flush()
            number = row.number
            if number is None:
                self._session.expunge(row)
                await self._abort()
                raise PersistenceError("add", "no number assigned to inserted parcel")
            self._session.expunge(row)
            await self._end()
        except _DB_ERRORS as exc:
            await self._abort()
            raise PersistenceError("add", str(exc)) from exc

        logger.debug("Parcel added", extra={"operation": "add", "parcel_number": number, "client": parcel.client})
        return number

    async def get(self, number: int) -> ParcelRead:
        """
        Fetch one parcel by number.

        Raises:
            NotFoundError: If no parcel has this number
            PersistenceError: If the read fails
        """
        try:
            result = await self._session.execute(select(*_COLUMNS).where(Parcel.number == number))
            row = result.one_or_none()
            await self._end()
        except _DB_ERRORS as exc:
            await self._abort()
            raise PersistenceError("get", str(exc)) from exc

        if row is None:
            raise NotFoundError("Parcel", number)
        return ParcelRead(**row._mapping)

    async def get_by_client(self, client: int) -> List[ParcelRead]:
        """All parcels of a client, in no particular order. Empty list if none."""
        try:
            result = await self._session.execute(select(*_COLUMNS).where(Parcel.client == client))
            rows = result.all()
            await self._end()
        except _DB_ERRORS as exc:
            await self._abort()
            raise PersistenceError("get_by_client", str(exc)) from exc

        return [ParcelRead(**row._mapping) for row in rows]

    async def set_status(self, number: int, status: str) -> None:
        """Overwrite the status unconditionally. No-op if the number is unknown."""
        statement = (
            update(Parcel)
            .where(Parcel.number == number)
            .values(status=status)
        )
        await self._write("set_status", number, statement)

    async def set_address(self, number: int, address: str) -> None:
        """Overwrite the address only while the parcel is registered. Otherwise a silent no-op."""
        statement = (
            update(Parcel)
            .where(
                Parcel.number == number,
                Parcel.status == ParcelStatus.REGISTERED.value
            )
            .values(address=address)
        )
        await self._write("set_address", number, statement)

    async def delete(self, number: int) -> None:
        """Remove the parcel only while it is registered. Otherwise a silent no-op."""
        statement = delete(Parcel).where(
            Parcel.number == number,
            Parcel.status == ParcelStatus.REGISTERED.value
        )
        await self._write("delete", number, statement)

    async def _write(self, operation: str, number: int, statement) -> None:
        """Run a single UPDATE/DELETE and commit it when autocommitting."""
        try:
            result = await self._session.execute(
                statement.execution_options(synchronize_session=False)
            )
            rows_affected = result.rowcount
            await self._end()
        except _DB_ERRORS as exc:
            await self._abort()
            raise PersistenceError(operation, str(exc)) from exc

        logger.debug(
            "Parcel write applied" if rows_affected else "Parcel write matched no row",
            extra={"operation": operation, "parcel_number": number, "rows_affected": rows_affected}
        )

    async def _end(self) -> None:
        if self._autocommit:
            await self._session.commit()

    async def _abort(self) -> None:
        if self._autocommit:
            await self._session.rollback()
