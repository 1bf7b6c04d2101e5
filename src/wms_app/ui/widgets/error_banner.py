from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ErrorBanner:
    message: str | None = None

    def show(self, message: str) -> None:
        self.message = message

    def clear(self) -> None:
        self.message = None

    @property
    def visible(self) -> bool:
        return self.message is not None

    def render(self) -> dict[str, object]:
        return {"visible": self.visible, "message": self.message}
