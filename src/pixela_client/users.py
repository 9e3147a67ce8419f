"""User account operations."""

from __future__ import annotations

import logging
from typing import Optional

from pixela_client.api_client import ApiClient
from pixela_client.models import ApiResponse
from pixela_client.params import ParameterBuilder

logger = logging.getLogger(__name__)


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


class UsersClient(ApiClient):
    """Create, re-token and delete the client's own user."""

    def create(
        self,
        agree_terms_of_service: bool = True,
        not_minor: bool = True,
        thanks_code: Optional[str] = None,
    ) -> ApiResponse:
        """Register the configured username / token as a new Pixela user.

        This is the only unauthenticated call besides webhook invocation.
        """
        params = (
            ParameterBuilder(
                {
                    "token": self.client.token,
                    "username": self.client.username,
                    "agreeTermsOfService": _yes_no(agree_terms_of_service),
                    "notMinor": _yes_no(not_minor),
                }
            )
            .add_optional("thanksCode", thanks_code)
            .build()
        )
        response = self.client.send("POST", "/v1/users", params, authenticated=False)
        logger.info("Created user %s", self.client.username)
        return response

    def update_token(self, new_token: str) -> ApiResponse:
        """Replace the user's token.

        The calling client keeps its old token; build a new
        :class:`~pixela_client.client.PixelaClient` to continue.
        """
        response = self.client.send("PUT", self._user_path(), {"newToken": new_token})
        logger.info("Updated token for %s", self.client.username)
        return response

    def delete(self) -> ApiResponse:
        """Delete the user together with all graphs and pixels."""
        response = self.client.send("DELETE", self._user_path())
        logger.info("Deleted user %s", self.client.username)
        return response
