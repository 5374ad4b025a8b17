"""Protocols for the collaborators driven by the intake coordinator."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClaimNumberAllocator(Protocol):
    """Anything that hands out strictly increasing claim numbers."""

    async def allocate(self) -> int: ...


@runtime_checkable
class CrmClient(Protocol):
    """Contact and ticket operations of the CRM.

    Transport is the implementation's concern; failures surface as exceptions.
    """

    async def find_contact_by_email(self, email: str) -> str | None: ...

    async def create_contact(self, properties: dict[str, str]) -> str: ...

    async def create_ticket(self, properties: dict[str, str]) -> str: ...


@runtime_checkable
class Notifier(Protocol):
    """Confirmation email sender. Returns False when delivery fails."""

    async def send(self, to: str, subject: str, html_body: str, text_body: str) -> bool: ...
