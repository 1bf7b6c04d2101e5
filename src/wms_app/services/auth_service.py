from __future__ import annotations

import logging

from wms_client_sdk import ApiSession
from wms_client_sdk.identity import IdentitySession

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def has_active_session(self) -> bool:
        """Any failure, including network trouble, counts as "not signed in"."""
        try:
            identity_session = self.session.identity.get_current_session()
        except Exception as exc:
            logger.info("no_active_session", extra={"reason": type(exc).__name__})
            return False
        self.session.establish(identity_session)
        return True

    def login(self, username: str, password: str) -> IdentitySession:
        logger.info("login_attempt", extra={"username": username})
        try:
            identity_session = self.session.identity.sign_in(username, password)
        except Exception:
            logger.exception("login_failure", extra={"username": username})
            raise
        self.session.establish(identity_session)
        logger.info("login_success", extra={"username": username})
        return identity_session

    def logout(self) -> None:
        logger.info("logout", extra={"username": self.session.username})
        self.session.identity.sign_out()
        self.session.clear()
