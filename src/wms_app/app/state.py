from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Route(str, Enum):
    LOADING = "loading"
    LOGIN = "login"
    SHELL = "shell"


@dataclass
class AppState:
    route: Route = Route.LOADING
    is_authenticated: bool = False
    is_authenticating: bool = False
    error_message: str | None = None
    status_message: str = "Ready"
    username: str | None = None
