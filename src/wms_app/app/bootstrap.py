from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Any

from wms_client_sdk import ApiSession, ClientConfig, IdentityError, load_config, to_user_facing_error
from wms_client_sdk.exceptions import ApiError

from wms_app.app.state import AppState, Route
from wms_app.config import AppConfig, load_app_config
from wms_app.services.auth_service import AuthService
from wms_app.services.inventory_service import InventoryService
from wms_app.services.orders_service import OrdersService
from wms_app.telemetry.events import login_result
from wms_app.telemetry.logger import TelemetryLogger
from wms_app.ui.login_view import LoginView
from wms_app.ui.shell_view import WmsShell

logger = logging.getLogger(__name__)


@dataclass
class BootstrapResult:
    route: Route
    error_message: str | None = None


class WmsBootstrap:
    """Session gate: decides between the login surface and the shell."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: ApiSession | None = None,
        app_config: AppConfig | None = None,
        telemetry: TelemetryLogger | None = None,
    ) -> None:
        self.config = config or (session.config if session is not None else load_config())
        self.session = session or ApiSession(self.config)
        self.app_config = app_config or load_app_config()
        self.state = AppState()
        self.auth_service = AuthService(self.session)
        self.telemetry = telemetry or TelemetryLogger(
            app_name="wms_app",
            enabled=self.app_config.telemetry_enabled,
            log_file=self.app_config.telemetry_file,
        )
        self.login_view = LoginView()
        self.shell: WmsShell | None = None

    def start(self) -> BootstrapResult:
        self.state.is_authenticating = True
        self._navigate(Route.LOADING, "Checking session...")
        try:
            active = self.auth_service.has_active_session()
        finally:
            self.state.is_authenticating = False
        if not active:
            self.state.is_authenticated = False
            self._navigate(Route.LOGIN, "No active session")
            return BootstrapResult(route=self.state.route)
        return self._mount_shell()

    def login(self, username: str, password: str) -> BootstrapResult:
        started = perf_counter()
        self.state.error_message = None
        self.login_view.username = username
        self.login_view.is_submitting = True
        try:
            self.auth_service.login(username, password)
        except Exception as exc:
            self.state.error_message = self._friendly_error(exc)
            self.login_view.error_message = self.state.error_message
            self._emit_auth_result(False, duration_ms=int((perf_counter() - started) * 1000))
            self._navigate(Route.LOGIN, "Authentication failed")
            return BootstrapResult(route=self.state.route, error_message=self.state.error_message)
        finally:
            self.login_view.is_submitting = False

        self.login_view.error_message = None
        self._emit_auth_result(True, duration_ms=int((perf_counter() - started) * 1000))
        return self._mount_shell()

    def logout(self) -> BootstrapResult:
        try:
            self.auth_service.logout()
        except Exception:
            # the session flag is left as it was
            logger.exception("logout_failure", extra={"username": self.state.username})
            return BootstrapResult(route=self.state.route)
        self.state.is_authenticated = False
        self.state.username = None
        self.shell = None
        self._navigate(Route.LOGIN, "Session cleared")
        return BootstrapResult(route=self.state.route)

    def _mount_shell(self) -> BootstrapResult:
        self.state.is_authenticated = True
        self.state.username = self.session.username
        self.state.error_message = None
        self.shell = WmsShell.create(
            InventoryService(self.session),
            OrdersService(self.session),
            app_config=self.app_config,
            telemetry=self.telemetry,
            on_logout=self.logout,
        )
        self._navigate(Route.SHELL, "Authenticated")
        self.shell.mount()
        logger.info("shell_ready", extra={"username": self.state.username})
        return BootstrapResult(route=self.state.route)

    def render(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "route": self.state.route.value,
            "status": self.state.status_message,
            "authenticated": self.state.is_authenticated,
        }
        if self.state.route == Route.LOADING:
            payload["loading"] = True
        elif self.state.route == Route.LOGIN:
            payload["login"] = self.login_view.render()
        elif self.shell is not None:
            payload["user"] = self.state.username
            payload["shell"] = self.shell.render()
        return payload

    @staticmethod
    def _friendly_error(exc: Exception) -> str:
        if isinstance(exc, IdentityError):
            return exc.message
        if isinstance(exc, ApiError):
            return to_user_facing_error(exc).message
        return str(exc) or "Unexpected client error"

    def _emit_auth_result(self, success: bool, *, duration_ms: int) -> None:
        self.telemetry.emit(login_result(success, duration_ms))

    def _navigate(self, route: Route, status_message: str) -> None:
        logger.info("navigation", extra={"route": route.value})
        self.state.route = route
        self.state.status_message = status_message
