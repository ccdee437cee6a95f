"""Transient, non-blocking messages produced by view operations for the UI to display."""

from dataclasses import dataclass

LEVEL_SUCCESS = "success"
LEVEL_ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: str
    title: str
    description: str

    @property
    def is_error(self) -> bool:
        return self.level == LEVEL_ERROR


def success(description: str, title: str = "Sucesso") -> Notification:
    return Notification(LEVEL_SUCCESS, title, description)


def error(description: str, title: str = "Erro") -> Notification:
    return Notification(LEVEL_ERROR, title, description)
