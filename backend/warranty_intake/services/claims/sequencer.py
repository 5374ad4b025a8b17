"""Durable, strictly increasing claim number sequencer."""

import asyncio

import structlog
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from warranty_intake.models.claim_counter import ClaimCounter
from warranty_intake.services.exceptions import AllocationError
from warranty_intake.utils.request_retry import RequestRetryConfig, get_request_retrying

logger = structlog.get_logger(__name__)

# Two processes may race to create the counter row on first use; the loser retries
COUNTER_CREATE_RETRY_CONFIG = RequestRetryConfig(max_attempts=3, min_wait=0.05, max_wait=0.5)


class ClaimSequencer:
    """Hands out claim numbers from a single named counter row.

    Each allocate() is one increment-commit unit:
    - an asyncio.Lock serializes callers inside this process
    - UPDATE ... SET value = value + 1 RETURNING value increments in the
      database, so processes sharing the database serialize on the row's
      write lock (SQLite 3.35+ and Postgres alike)
    - the new value is returned only after the transaction commits

    A failed commit rolls back, so no caller ever sees an uncommitted value.
    A value whose commit succeeded but whose caller went away is consumed
    for good (a gap, never a duplicate).

    Usage:
        sequencer = ClaimSequencer(async_session_maker, name="global", seed=100000)
        claim_number = await sequencer.allocate()  # 100001 on an empty database
    """

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        *,
        name: str = "global",
        seed: int = 100000,
    ):
        self._session_maker = session_maker
        self.name = name
        self.seed = seed
        self._lock = asyncio.Lock()

    async def allocate(self) -> int:
        """Allocate the next claim number.

        Raises:
            AllocationError: If the counter could not be durably advanced
        """
        # Shielded so a dropped request cannot cancel the critical section midway
        return await asyncio.shield(self._allocate())

    async def peek(self) -> int | None:
        """Return the last issued claim number, or None before the first allocation."""
        async with self._session_maker() as session:
            result = await session.execute(select(ClaimCounter.value).where(ClaimCounter.name == self.name))
            return result.scalar_one_or_none()

    async def _allocate(self) -> int:
        async with self._lock:
            try:
                async for attempt in get_request_retrying(COUNTER_CREATE_RETRY_CONFIG, retry_on=IntegrityError):
                    with attempt:
                        if attempt.retry_state.attempt_number > 1:
                            logger.warning(
                                "Retrying claim number allocation",
                                counter=self.name,
                                attempt=attempt.retry_state.attempt_number,
                            )
                        return await self._advance()
            except SQLAlchemyError as e:
                logger.error("Claim number allocation failed", counter=self.name, error=str(e))
                raise AllocationError(f"Could not allocate a claim number from counter '{self.name}'") from e

        raise RuntimeError("Unreachable")

    async def _advance(self) -> int:
        # Leaving the session context without a commit rolls the transaction back
        async with self._session_maker() as session:
            # Increment and read back in one statement: the row's write lock is held
            # until commit on both SQLite and Postgres, so no other process can
            # read the value in between
            stmt = (
                update(ClaimCounter)
                .where(ClaimCounter.name == self.name)
                .values(value=ClaimCounter.value + 1)
                .returning(ClaimCounter.value)
                .execution_options(synchronize_session=False)
            )
            result = await session.execute(stmt)
            value = result.scalar_one_or_none()

            if value is None:
                # A concurrent creator wins on the primary key; the retry then updates its row
                logger.info("Creating claim counter", counter=self.name, seed=self.seed)
                value = self.seed + 1
                session.add(ClaimCounter(name=self.name, value=value))

            await session.commit()

        logger.info("Allocated claim number", counter=self.name, claim_number=value)
        return value
