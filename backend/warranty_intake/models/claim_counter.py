"""Claim counter model backing the claim number sequencer."""

from sqlmodel import Field, SQLModel


class ClaimCounter(SQLModel, table=True):
    """Last issued claim number for a named counter.

    Rows are created lazily with the configured seed and only ever advanced
    by ClaimSequencer, which locks the row with SELECT ... FOR UPDATE.
    """

    __tablename__ = "claim_counters"

    name: str = Field(primary_key=True, max_length=64)
    value: int
