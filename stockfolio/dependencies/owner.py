"""Owner identity resolution for portfolio-scoped requests."""

from fastapi import Header, HTTPException, status

from stockfolio.config import settings
from stockfolio.constants import OWNER_HEADER


def get_owner_identity(
    x_owner_identity: str | None = Header(
        None,
        alias=OWNER_HEADER,
        description="Portfolio owner (e.g. email). Falls back to the configured default owner.",
    ),
) -> str:
    """
    Resolve the portfolio owner for this request.

    The owner comes from the X-Owner-Identity header; requests without it
    act on the configured default owner.
    """
    if x_owner_identity is None:
        return settings.default_owner_identity

    owner_identity = x_owner_identity.strip()
    if not owner_identity:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{OWNER_HEADER} header cannot be empty",
        )
    return owner_identity
