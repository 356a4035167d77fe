from __future__ import annotations

import logging

import requests
from urllib3.util import Timeout

from statuscheck.checks.results import CheckResult

logger = logging.getLogger(__name__)


def run_http(url: str, timeout_s: float) -> CheckResult:
    try:
        # stream=True so only the status line and headers are read
        with requests.get(url, timeout=Timeout(total=timeout_s), stream=True) as r:
            status_code = r.status_code
    except requests.RequestException as e:
        logger.debug("GET %s failed: %s", url, e)
        return CheckResult(error=str(e))

    logger.debug("GET %s -> %s", url, status_code)
    return CheckResult(status_code=status_code)
