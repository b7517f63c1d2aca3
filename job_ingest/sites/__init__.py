"""Per-site extractors and URL classification."""

from __future__ import annotations

import logging

from .base import SiteExtractor
from .generic import GenericExtractor
from .greenhouse import GreenhouseExtractor
from .handshake import HandshakeExtractor
from .indeed import IndeedExtractor
from .linkedin import LinkedInExtractor

logger = logging.getLogger(__name__)

# Checked in this order; the first match wins.
_EXTRACTOR_CLASSES = (GreenhouseExtractor, LinkedInExtractor, IndeedExtractor, HandshakeExtractor)

SITES = tuple(cls.name for cls in _EXTRACTOR_CLASSES) + (GenericExtractor.name,)


def get_extractor(url: str) -> SiteExtractor:
    """Return the extractor for `url`, falling back to the generic one."""
    for extractor_cls in _EXTRACTOR_CLASSES:
        if extractor_cls.matches_url(url):
            return extractor_cls()
    return GenericExtractor()


def detect_site(url: str) -> str:
    """Return the site identifier for `url` (one of `SITES`)."""
    site = get_extractor(url).name
    logger.debug("Detected site %s for %s", site, url)
    return site


__all__ = [
    "GenericExtractor",
    "GreenhouseExtractor",
    "HandshakeExtractor",
    "IndeedExtractor",
    "LinkedInExtractor",
    "SITES",
    "SiteExtractor",
    "detect_site",
    "get_extractor",
]
