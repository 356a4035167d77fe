"""Messages exchanged between commands, the program loop and the model."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

CTRL_C = "ctrl+c"


@dataclass(frozen=True)
class StatusMsg:
    """HTTP status code returned by the server."""

    code: int


@dataclass(frozen=True)
class ErrorMsg:
    """Error raised while talking to the server."""

    error: str


@dataclass(frozen=True)
class KeyMsg:
    key: str


@dataclass(frozen=True)
class QuitMsg:
    pass


Msg = StatusMsg | ErrorMsg | KeyMsg | QuitMsg

# A command runs off the loop thread and hands its result back as a message.
Cmd = Callable[[], Msg | None]


def quit_cmd() -> QuitMsg:
    """Command telling the program to stop processing messages."""
    return QuitMsg()
