from __future__ import annotations

import logging
import queue
import threading
from typing import Any

from rich.console import Console
from rich.live import Live
from rich.text import Text

from statuscheck.messages import CTRL_C, Cmd, KeyMsg, Msg, QuitMsg, quit_cmd

logger = logging.getLogger(__name__)


class ProgramError(Exception):
    pass


class _CmdFailed:
    def __init__(self, exc: BaseException) -> None:
        self.exc = exc


class Program:
    """
    Runs a model until it asks to quit.

    The model is only ever touched from the thread calling run(). Commands
    run on daemon threads and post their result back through a queue, so a
    slow command never blocks Ctrl+C.
    """

    def __init__(self, model: Any, console: Console | None = None) -> None:
        self.model = model
        self.console = console or Console()
        self._msgs: queue.Queue = queue.Queue()

    def send(self, msg: Msg | object) -> None:
        self._msgs.put(msg)

    def _exec(self, cmd: Cmd) -> None:
        def target() -> None:
            try:
                msg = cmd()
            except Exception as e:
                logger.debug("Command %s failed", getattr(cmd, "__name__", cmd), exc_info=True)
                self._msgs.put(_CmdFailed(e))
                return
            if msg is not None:
                self._msgs.put(msg)

        threading.Thread(target=target, daemon=True).start()

    def _next_msg(self) -> Msg:
        try:
            return self._msgs.get()
        except KeyboardInterrupt:
            return KeyMsg(CTRL_C)

    def _render(self, live: Live) -> None:
        live.update(Text(self.model.view()), refresh=True)

    def run(self) -> Any:
        """Run the loop and return the final model."""
        try:
            with Live(
                Text(self.model.view()),
                console=self.console,
                auto_refresh=False,
                redirect_stdout=False,
                redirect_stderr=False,
            ) as live:
                cmd = self.model.init()
                while cmd is not quit_cmd:
                    if cmd is not None:
                        self._exec(cmd)

                    msg = self._next_msg()
                    if isinstance(msg, _CmdFailed):
                        raise ProgramError(f"command failed: {msg.exc}") from msg.exc
                    if isinstance(msg, QuitMsg):
                        break

                    self.model, cmd = self.model.update(msg)
                    self._render(live)
        except KeyboardInterrupt:
            # Ctrl+C outside _next_msg: stop with the state as it stands
            logger.debug("Interrupted, stopping")
        except ProgramError:
            raise
        except Exception as e:
            raise ProgramError(str(e)) from e

        logger.debug("Program finished with %r", self.model)
        return self.model
