from __future__ import annotations

import logging
from typing import Optional

from .random_source import RandomSource, choice, default_source
from .tables import DEFAULT_REGION, REGION_FIRST_NAMES, REGION_LAST_NAMES

logger = logging.getLogger(__name__)


class NameGenerator:
    """Builds "First Last" names from region name lists; unknown regions use the default region."""

    def __init__(self, source: Optional[RandomSource] = None, default_region: str = DEFAULT_REGION) -> None:
        if default_region not in REGION_FIRST_NAMES:
            raise ValueError(f"Unknown default region {default_region!r}")
        self.source = source or default_source()
        self.default_region = default_region

    def generate(self, region_id: str) -> str:
        region = region_id if region_id in REGION_FIRST_NAMES else self.default_region
        if region != region_id:
            logger.debug("No name lists for region %r; using %r", region_id, region)
        first = choice(self.source, REGION_FIRST_NAMES[region])
        last = choice(self.source, REGION_LAST_NAMES[region])
        return f"{first} {last}"
