from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class LoginView:
    title: str = "Dream World WMS Login"
    username: str = ""
    error_message: str | None = None
    is_submitting: bool = False

    def render_message(self) -> str:
        return "Please sign in to continue."

    def render(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "message": self.render_message(),
            "username": self.username,
            "error": self.error_message,
            "submitting": self.is_submitting,
        }
