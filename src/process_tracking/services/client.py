# This project was developed with assistance from AI tools.
"""Client lookup for the status services."""

from uuid import UUID

from db import ClientProfile, User
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.status import ClientInfo


class ClientNotFoundError(LookupError):
    """Raised when a client id has no user record."""

    def __init__(self, client_id: UUID):
        super().__init__(f"Client {client_id} not found")
        self.client_id = client_id


async def get_client(session: AsyncSession, client_id: UUID) -> ClientInfo:
    """Load a client's identity and subscription details.

    The profile is optional; a user without one reports no subscription.

    Raises:
        ClientNotFoundError: No user exists with this id.
    """
    stmt = (
        select(User, ClientProfile.subscription_status)
        .outerjoin(ClientProfile, ClientProfile.user_id == User.id)
        .where(User.id == client_id)
    )
    row = (await session.execute(stmt)).first()
    if row is None:
        raise ClientNotFoundError(client_id)

    user, subscription_status = row
    return ClientInfo(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        subscription_status=subscription_status,
        member_since=user.created_at,
    )
