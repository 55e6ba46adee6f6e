from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc, delete
from typing import List

from catharsis.models.schema_models import TicketSchema
from catharsis.models.schemas import Ticket


class CreateData:
    @staticmethod
    async def add_ticket_data(date: str, word: str, content: str, session: AsyncSession) -> int:
        """Add a ticket without committing; the caller owns the transaction.

        Args:
            date (str): Day the ticket belongs to (YYYY-MM-DD)
            word (str): Uppercase daily word solved that day
            content (str): Note entered by the user

        Returns:
            int: Surrogate id assigned by the database
        """
        new_ticket = Ticket(
            date=date,
            word=word,
            content=content,
        )
        session.add(new_ticket)
        await session.flush()
        return new_ticket.id


class ReadData:
    @staticmethod
    async def read_all_tickets(session: AsyncSession) -> List[TicketSchema]:
        """Read every ticket, newest date first

        Returns:
            List[TicketSchema]: All stored tickets
        """
        stmt = select(Ticket).order_by(desc(Ticket.date))
        result = await session.execute(stmt)
        result = result.scalars().all()
        return [TicketSchema.model_validate(ticket) for ticket in result]

    @staticmethod
    async def read_ticket_exists(date: str, session: AsyncSession) -> bool:
        """Check whether a ticket exists for the date

        Args:
            date (str): Day to look up (YYYY-MM-DD)

        Returns:
            bool: True if a ticket exists for this date
        """
        stmt = select(Ticket.id).where(Ticket.date == date).limit(1)
        result = await session.execute(stmt)
        return result.scalars().first() is not None


class DeleteData:
    @staticmethod
    async def delete_all_tickets(session: AsyncSession) -> int:
        """Delete every ticket without committing

        Returns:
            int: Number of deleted rows
        """
        result = await session.execute(delete(Ticket))
        return result.rowcount
