"""Authenticated session passed explicitly to every use case."""

from typing import Optional

from humor.domain.model.common import DomainModel
from humor.domain.value import ProfileId


class AuthSession(DomainModel):
    """The logged-in user behind a request.

    Built from a verified session token at the interface layer. Use cases
    receive it as an argument; a missing session means the caller is not
    authenticated.
    """

    user_id: ProfileId
    email: Optional[str] = None
