from .auth_store import AuthStore
from .config import ClientConfig, ConfigError, load_config
from .exceptions import ApiError, IdentityError, NoSessionError, TransportError
from .http_client import HttpClient, TraceContext
from .identity import CognitoIdentityProvider, IdentityProvider, IdentitySession
from .models import (
    FULFILLED_STATUSES,
    ORDER_STATUSES,
    Item,
    ItemUpdate,
    LineItem,
    Order,
    OrderStatus,
    SessionData,
)
from .session import ApiSession
from .ui_errors import UserFacingError, to_user_facing_error

__all__ = [
    "ApiError",
    "ApiSession",
    "AuthStore",
    "ClientConfig",
    "CognitoIdentityProvider",
    "ConfigError",
    "FULFILLED_STATUSES",
    "HttpClient",
    "IdentityError",
    "IdentityProvider",
    "IdentitySession",
    "Item",
    "ItemUpdate",
    "LineItem",
    "NoSessionError",
    "ORDER_STATUSES",
    "Order",
    "OrderStatus",
    "SessionData",
    "TraceContext",
    "TransportError",
    "UserFacingError",
    "load_config",
    "to_user_facing_error",
]
