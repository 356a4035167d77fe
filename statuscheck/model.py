from __future__ import annotations

from dataclasses import dataclass, replace
from http import HTTPStatus

from statuscheck.checks.http_check import run_http
from statuscheck.config import settings
from statuscheck.messages import CTRL_C, Cmd, ErrorMsg, KeyMsg, Msg, StatusMsg, quit_cmd


def status_text(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def check_server() -> StatusMsg | ErrorMsg:
    res = run_http(settings.TARGET_URL, timeout_s=settings.CHECK_TIMEOUT_SECONDS)
    if res.error is not None:
        return ErrorMsg(res.error)
    return StatusMsg(res.status_code)


@dataclass(frozen=True)
class Model:
    """
    Application state: the status code or the error of the one check.
    Both are None until the check completes.
    """

    status: int | None = None
    error: str | None = None
    target: str = settings.TARGET_URL

    def init(self) -> Cmd | None:
        return check_server

    def update(self, msg: Msg) -> tuple[Model, Cmd | None]:
        if isinstance(msg, StatusMsg):
            return replace(self, status=msg.code), quit_cmd
        if isinstance(msg, ErrorMsg):
            return replace(self, error=msg.error), quit_cmd
        if isinstance(msg, KeyMsg) and msg.key == CTRL_C:
            return self, quit_cmd
        return self, None

    def view(self) -> str:
        if self.error is not None:
            return f"\nWe had some trouble: {self.error}\n\n"

        s = f"Checking {self.target} ... "
        if self.status is not None:
            s += f"{self.status} {status_text(self.status)}!"
        return "\n" + s + "\n\n"
