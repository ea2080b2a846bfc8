# site_probe.py
import logging
import time
from dataclasses import dataclass
from typing import Optional

import requests

from sauce_config import PROBE_TIMEOUT_S

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeResult:
    url: str
    status: Optional[int]
    latency_ms: float
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status is not None and self.status < 400


def probe_site(url: str, timeout: float = PROBE_TIMEOUT_S) -> ProbeResult:
    """GET `url` once and report status + latency; network errors are reported, not raised."""
    t0 = time.perf_counter()
    try:
        r = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        ms = (time.perf_counter() - t0) * 1000.0
        logger.warning("probe %s failed: %s", url, e)
        return ProbeResult(url, None, round(ms, 2), str(e))
    ms = (time.perf_counter() - t0) * 1000.0

    if r.status_code >= 400:
        logger.warning("probe %s -> HTTP %s", url, r.status_code)
        return ProbeResult(url, r.status_code, round(ms, 2), f"{r.status_code} {r.reason}")

    logger.debug("probe %s -> %s in %.1fms", url, r.status_code, ms)
    return ProbeResult(url, r.status_code, round(ms, 2))
