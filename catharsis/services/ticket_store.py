"""Ticket store.

- Owns the engine, the session factory and the transaction boundaries.
- Routers and use cases never touch sessions; they call this object.
- Database failures are logged and re-raised as TicketStoreError subclasses.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catharsis.create_sqlite_engine import create_engine
from catharsis.crud import CreateData, DeleteData, ReadData
from catharsis.exceptions import DuplicateDateError, StoreUnavailableError
from catharsis.models.schema_models import TicketSchema
from catharsis.models.schemas import Base


class TicketStore:
    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = create_engine(database_url)
        self.Session = async_sessionmaker(
            autocommit=False,
            class_=AsyncSession,
            autoflush=True,
            expire_on_commit=False,
            bind=self.engine,
        )

    async def __aenter__(self) -> "TicketStore":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def open(self) -> None:
        """Create the tickets table if it does not exist yet."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logging.error(f"Failed to open ticket store: {e}")
            raise StoreUnavailableError("Failed to open ticket store") from e
        logging.info(f"Ticket store opened: {self.engine.url.render_as_string(hide_password=True)}")

    async def close(self) -> None:
        await self.engine.dispose()
        logging.info("Ticket store closed")

    async def insert(self, date: str, word: str, content: str) -> int:
        """Persist a ticket for the date in one transaction.

        Args:
            date (str): Day the ticket belongs to (YYYY-MM-DD)
            word (str): Uppercase daily word
            content (str): Note entered by the user

        Raises:
            DuplicateDateError: A ticket for this date already exists
            StoreUnavailableError: Any other database failure

        Returns:
            int: Id of the new ticket
        """
        try:
            async with self.Session() as session:
                async with session.begin():
                    ticket_id = await CreateData.add_ticket_data(date, word, content, session)
        except IntegrityError as e:
            logging.warning(f"Ticket for {date} already exists: {e.orig}")
            raise DuplicateDateError(date) from e
        except SQLAlchemyError as e:
            logging.error(f"Failed to create ticket data: {e}")
            raise StoreUnavailableError("Failed to create ticket data") from e
        logging.info(f"Ticket {ticket_id} created for {date}")
        return ticket_id

    async def list_all(self) -> List[TicketSchema]:
        try:
            async with self.Session() as session:
                return await ReadData.read_all_tickets(session)
        except SQLAlchemyError as e:
            logging.error(f"Failed to read ticket data: {e}")
            raise StoreUnavailableError("Failed to read ticket data") from e

    async def exists(self, date: str) -> bool:
        try:
            async with self.Session() as session:
                return await ReadData.read_ticket_exists(date, session)
        except SQLAlchemyError as e:
            logging.error(f"Failed to read ticket data: {e}")
            raise StoreUnavailableError("Failed to read ticket data") from e

    async def delete_all(self) -> int:
        """Delete every ticket. Irreversible.

        Returns:
            int: Number of deleted tickets
        """
        try:
            async with self.Session() as session:
                async with session.begin():
                    deleted = await DeleteData.delete_all_tickets(session)
        except SQLAlchemyError as e:
            logging.error(f"Failed to delete ticket data: {e}")
            raise StoreUnavailableError("Failed to delete ticket data") from e
        logging.info(f"Deleted {deleted} tickets")
        return deleted
