"""
Outlet Classifier — publisher identifier to media type

Maps the FROM column (a domain or outlet identifier) to a media_type
and, for Catholic outlets, a catholic_subcategory.

Priority is first-match-wins and load-bearing:
  - Catholic subcategory: Official Church -> Catholic Radio ->
    Catholic Portals -> Catholic Aligned -> none
  - Media type: Catholic (if any subcategory matched) -> Conservative
    -> Liberal -> Tabloid -> Regional -> Business -> Other

An outlet that matches a Catholic group and a secular group is always
Catholic. Unknown or missing identifiers fall through to Other.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from digikat.lexicon import (
    CATHOLIC_GROUPS,
    SECULAR_GROUPS,
    MEDIA_TYPE_CATHOLIC,
    MEDIA_TYPE_OTHER,
    KeywordGroup,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutletLabel:
    media_type: str
    catholic_subcategory: Optional[str] = None


class OutletClassifier:
    """
    Compiles each outlet group once and classifies identifiers against
    them in priority order. Holds no mutable state.
    """

    def __init__(
        self,
        catholic_groups: tuple[KeywordGroup, ...] = CATHOLIC_GROUPS,
        secular_groups: tuple[KeywordGroup, ...] = SECULAR_GROUPS,
    ):
        self._catholic = [
            (g.label, re.compile(g.pattern(), re.IGNORECASE)) for g in catholic_groups
        ]
        self._secular = [
            (g.label, re.compile(g.pattern(), re.IGNORECASE)) for g in secular_groups
        ]

    def catholic_subcategory(self, publisher_id) -> Optional[str]:
        if not isinstance(publisher_id, str):
            return None
        from_lower = publisher_id.lower()
        for label, regex in self._catholic:
            if regex.search(from_lower):
                return label
        return None

    def classify(self, publisher_id) -> OutletLabel:
        """Classify one identifier. Never raises."""
        subcategory = self.catholic_subcategory(publisher_id)
        if subcategory is not None:
            return OutletLabel(MEDIA_TYPE_CATHOLIC, subcategory)
        if not isinstance(publisher_id, str):
            return OutletLabel(MEDIA_TYPE_OTHER)

        from_lower = publisher_id.lower()
        for label, regex in self._secular:
            if regex.search(from_lower):
                return OutletLabel(label)
        return OutletLabel(MEDIA_TYPE_OTHER)

    def annotate(self, df: pd.DataFrame, column: str = "FROM") -> pd.DataFrame:
        """Add media_type and catholic_subcategory columns to df."""
        # Many rows share an outlet; classify each distinct identifier once
        labels = {pid: self.classify(pid) for pid in df[column].dropna().unique()}
        fallback = OutletLabel(MEDIA_TYPE_OTHER)

        resolved = [labels.get(pid, fallback) if isinstance(pid, str) else fallback
                    for pid in df[column]]
        df["media_type"] = [lab.media_type for lab in resolved]
        df["catholic_subcategory"] = pd.Series(
            [lab.catholic_subcategory for lab in resolved], index=df.index, dtype="object",
        )

        for media_type, n in df["media_type"].value_counts().items():
            logger.info("  %s: %s", media_type, f"{n:,}",
                        extra={"stage": "outlets", "rows": int(n)})
        return df


_default_classifier = OutletClassifier()


def classify_outlet(publisher_id) -> OutletLabel:
    """Classify with the shared default classifier."""
    return _default_classifier.classify(publisher_id)
