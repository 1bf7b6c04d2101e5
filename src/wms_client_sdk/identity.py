"""Identity collaborator: an AWS Cognito user pool reached through boto3.

The rest of the code only sees the ``IdentityProvider`` protocol, so the
session gate can be driven by a fake in tests. Token storage and refresh are
this module's business; the gate only learns "signed in" or the provider's
error text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .auth_store import AuthStore
from .config import ClientConfig
from .exceptions import IdentityError, NoSessionError
from .models import SessionData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentitySession:
    username: str
    access_token: str


class IdentityProvider(Protocol):
    def get_current_session(self) -> IdentitySession:
        stored = self.auth_store.load()
        if stored is None:
            raise NoSessionError("No current user", code="UserUnAuthenticatedException")
        try:
            user = self.client.get_user(AccessToken=stored.access_token)
        except ClientError as exc:
            if _error_code(exc) != "NotAuthorizedException" or not stored.refresh_token:
                raise _identity_error(exc) from exc
            logger.info("access_token_expired", extra={"username": stored.username})
            stored = self._refresh(stored)
            return IdentitySession(username=stored.username, access_token=stored.access_token)
        except BotoCoreError as exc:
            raise _identity_error(exc) from exc
        return IdentitySession(username=user.get("Username") or stored.username, access_token=stored.access_token)

    def _refresh(self, stored: SessionData) -> SessionData:
        try:
            response = self.client.initiate_auth(
                AuthFlow="REFRESH_TOKEN_AUTH",
                ClientId=self.config.cognito_client_id,
                AuthParameters={"REFRESH_TOKEN": stored.refresh_token},
            )
        except (ClientError, BotoCoreError) as exc:
            raise _identity_error(exc) from exc
        result = response.get("AuthenticationResult") or {}
        access_token = result.get("AccessToken")
        if not access_token:
            raise IdentityError("Token refresh did not return an access token", code="MissingToken")
        # the pool only issues a new refresh token when rotation is enabled
        refreshed = stored.model_copy(
            update={
                "access_token": access_token,
                "id_token": result.get("IdToken") or stored.id_token,
                "refresh_token": result.get("RefreshToken") or stored.refresh_token,
            }
        )
        self.auth_store.save(refreshed)
        return refreshed

    def sign_in(self, username: str, password: str) -> IdentitySession:
        try:
            response = self.client.initiate_auth(
                AuthFlow="USER_PASSWORD_AUTH",
                ClientId=self.config.cognito_client_id,
                AuthParameters={"USERNAME": username, "PASSWORD": password},
            )
        except (ClientError, BotoCoreError) as exc:
            raise _identity_error(exc) from exc

        challenge = response.get("ChallengeName")
        if challenge:
            raise IdentityError(f"Sign-in requires an additional step: {challenge}", code=challenge)
        result = response.get("AuthenticationResult") or {}
        access_token = result.get("AccessToken")
        if not access_token:
            raise IdentityError("Sign-in did not return an access token", code="MissingToken")

        self.auth_store.save(
            SessionData(
                username=username,
                access_token=access_token,
                id_token=result.get("IdToken"),
                refresh_token=result.get("RefreshToken"),
                env_name=self.config.env_name,
            )
        )
        return IdentitySession(username=username, access_token=access_token)

    def sign_out(self) -> None:
        stored = self.auth_store.load()
        if stored and stored.refresh_token:
            try:
                self.client.revoke_token(Token=stored.refresh_token, ClientId=self.config.cognito_client_id)
            except (ClientError, BotoCoreError) as exc:
                raise _identity_error(exc) from exc
        self.auth_store.clear()
