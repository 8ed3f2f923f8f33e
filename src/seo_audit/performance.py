"""Paint and layout-shift metrics providers."""

import logging
import random
from abc import ABC, abstractmethod
from typing import Optional

from seo_audit.constants import (
    SYNTHETIC_CLS_MAX,
    SYNTHETIC_FCP_BASE_MS,
    SYNTHETIC_FCP_SPREAD_MS,
    SYNTHETIC_LCP_BASE_MS,
    SYNTHETIC_LCP_SPREAD_MS,
)
from seo_audit.models import PerformanceMetrics

logger = logging.getLogger(__name__)


class PerformanceMetricsProvider(ABC):
    """Source of FCP, LCP and CLS values for a page."""

    @abstractmethod
    def measure(self, url: str) -> PerformanceMetrics:
        """Return metrics for the page at ``url``."""


class SyntheticPerformanceMetrics(PerformanceMetricsProvider):
    """Generates plausible metrics without loading the page in a browser.

    The values are random and flagged ``synthetic=True``; they feed the
    performance suggestions but never the score. Pass a seeded
    ``random.Random`` for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def measure(self, url: str) -> PerformanceMetrics:
        metrics = PerformanceMetrics(
            fcp_ms=int(SYNTHETIC_FCP_BASE_MS + self.rng.random() * SYNTHETIC_FCP_SPREAD_MS),
            lcp_ms=int(SYNTHETIC_LCP_BASE_MS + self.rng.random() * SYNTHETIC_LCP_SPREAD_MS),
            cls=round(self.rng.random() * SYNTHETIC_CLS_MAX, 2),
            synthetic=True,
        )
        logger.debug(f"Synthetic metrics for {url}: {metrics}")
        return metrics
