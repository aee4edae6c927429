from typing import Optional

import attr

from ..models.invite import Invite
from ..rest.builders import ParamsBuilder
from ..rest.route import Route
from .base import Resource

__all__ = ("Invites",)


@attr.define
class Invites(Resource):
    """Endpoints under ``/invites/{invite_code}``"""

    async def get(self, invite_code: str, *, with_counts: bool = False) -> Invite:
        """Resolve an invite code (or its ``discord.gg`` URL).

        Parameters
        ----------
        invite_code : builtins.str
            The code, a full invite URL is accepted too.
        with_counts : builtins.bool
            Include the approximate member counts.

        Returns
        -------
        cordrest.models.invite.Invite
        """

        params = ParamsBuilder(with_counts=True) if with_counts else None

        response = await self.rest.request(
            route=Route(
                "GET", "/invites/{invite_code}", invite_code=_code(invite_code)
            ),
            params=params,
        )
        return self._one(Invite, response)

    async def delete(self, invite_code: str, *, reason: Optional[str] = None) -> Invite:
        """Revoke an invite, returns it as it was"""

        response = await self.rest.request(
            route=Route(
                "DELETE", "/invites/{invite_code}", invite_code=_code(invite_code)
            ),
            reason=reason,
        )
        return self._one(Invite, response)


def _code(invite: str) -> str:
    return invite.rstrip("/").rsplit("/", 1)[-1]
