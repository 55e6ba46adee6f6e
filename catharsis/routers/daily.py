import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Request, status, HTTPException

from catharsis.exceptions import (
    AlreadyCompletedError,
    ConfirmationRequiredError,
    ContentTooLongError,
    StoreUnavailableError,
    WrongWordError,
)
from catharsis.models.dc_models import CompleteModel, ResetModel
from catharsis.models.schema_models import (
    CompletedSchema,
    DailyTaskSchema,
    ResetSchema,
    StatsSchema,
)
from catharsis.services import daily_task
from catharsis.services.ticket_store import TicketStore

daily_router = APIRouter(prefix="/api")


def get_store(request: Request) -> TicketStore:
    """The store opened by the app lifespan."""
    return request.app.state.store


def get_today() -> str:
    return daily_task.today_iso()


def store_unavailable(e: StoreUnavailableError) -> HTTPException:
    logging.error(f"Ticket store unavailable: {e}")
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Ticket store unavailable",
    )


class DailyTaskAPI:
    @staticmethod
    @daily_router.get("/daily-task", response_model=DailyTaskSchema)
    async def read_daily_task(
        store: TicketStore = Depends(get_store), today: str = Depends(get_today)
    ):
        try:
            return await daily_task.get_daily_task(store, today)
        except StoreUnavailableError as e:
            raise store_unavailable(e)

    @staticmethod
    @daily_router.post("/complete", response_model=CompletedSchema)
    async def complete(
        submission: CompleteModel,
        store: TicketStore = Depends(get_store),
        today: str = Depends(get_today),
    ):
        """Check the guess against today's word and record the ticket

        Args:
            submission (CompleteModel): Guessed word and optional note
        """
        try:
            ticket_id = await daily_task.complete_day(
                store, today, submission.word, submission.content
            )
        except WrongWordError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        except AlreadyCompletedError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        except ContentTooLongError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except StoreUnavailableError as e:
            raise store_unavailable(e)
        return CompletedSchema(id=ticket_id)


class StatsAPI:
    @staticmethod
    @daily_router.get("/stats", response_model=StatsSchema)
    async def read_stats(
        store: TicketStore = Depends(get_store), today: str = Depends(get_today)
    ):
        try:
            return await daily_task.get_stats(store, today)
        except StoreUnavailableError as e:
            raise store_unavailable(e)

    @staticmethod
    @daily_router.post("/reset", response_model=ResetSchema)
    async def reset(
        request: Request,
        confirmation: Optional[ResetModel] = Body(default=None),
        store: TicketStore = Depends(get_store),
    ):
        """Delete every ticket.

        The client asks the user before calling this. When the app is built with
        `reset_requires_confirmation`, the body must also be {"confirm": true}.
        """
        try:
            confirmed = confirmation is not None and confirmation.confirm
            if request.app.state.reset_requires_confirmation and not confirmed:
                raise ConfirmationRequiredError()
            deleted = await daily_task.reset(store)
        except ConfirmationRequiredError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        except StoreUnavailableError as e:
            raise store_unavailable(e)
        return ResetSchema(deleted=deleted)


class HealthAPI:
    @staticmethod
    @daily_router.get("/health")
    async def health():
        return {"status": "ok"}
