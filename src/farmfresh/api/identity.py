"""Request identity supplied by the upstream identity provider.

The provider authenticates the caller and forwards who they are as the
``X-User-Id`` and ``X-User-Role`` headers.
"""

from dataclasses import dataclass
from enum import Enum

from fastapi import Depends, Header, HTTPException

from farmfresh.exceptions import Forbidden


class Role(Enum):
    CUSTOMER = "customer"
    FARMER = "farmer"


@dataclass(frozen=True)
class Identity:
    user_id: str
    role: Role

    @property
    def is_farmer(self) -> bool:
        return self.role == Role.FARMER


def current_identity(
    x_user_id: str = Header(default=""),
    x_user_role: str = Header(default=Role.CUSTOMER.value),
) -> Identity:
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Authentication required")
    try:
        role = Role(x_user_role.lower())
    except ValueError:
        raise HTTPException(status_code=401, detail=f"Unknown role '{x_user_role}'") from None
    return Identity(user_id=x_user_id, role=role)


def require_farmer(identity: Identity = Depends(current_identity)) -> Identity:
    if not identity.is_farmer:
        raise Forbidden("Farmer access required")
    return identity
