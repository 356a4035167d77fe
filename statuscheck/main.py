from __future__ import annotations

import logging
import sys

from statuscheck.config import setup_logging
from statuscheck.model import Model
from statuscheck.program import Program, ProgramError

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()

    p = Program(Model())
    try:
        p.run()
    except ProgramError as e:
        logger.debug("Program run failed", exc_info=True)
        print(f"Uh oh, there was an error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
