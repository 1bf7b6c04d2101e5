from __future__ import annotations

from dataclasses import dataclass

from .auth_store import AuthStore
from .clients.items_client import ItemsClient
from .clients.orders_client import OrdersClient
from .config import ClientConfig
from .http_client import HttpClient, TraceContext
from .identity import CognitoIdentityProvider, IdentityProvider, IdentitySession


@dataclass
class ApiSession:
    config: ClientConfig
    identity: IdentityProvider | None = None
    auth_store: AuthStore | None = None
    trace: TraceContext | None = None
    token: str | None = None
    username: str | None = None

    def __post_init__(self) -> None:
        self.auth_store = self.auth_store or AuthStore()
        self.trace = self.trace or TraceContext()
        if self.identity is None:
            self.identity = CognitoIdentityProvider(self.config, auth_store=self.auth_store)

    def _http(self) -> HttpClient:
        return HttpClient(config=self.config, trace=self.trace)

    def items_client(self) -> ItemsClient:
        return ItemsClient(http=self._http(), access_token=self.token)

    def orders_client(self) -> OrdersClient:
        return OrdersClient(http=self._http(), access_token=self.token)

    def establish(self, identity_session: IdentitySession) -> None:
        self.token = identity_session.access_token
        self.username = identity_session.username

    def clear(self) -> None:
        self.token = None
        self.username = None
