#
# src/suitediff/extraction/factory.py
#
"""
Factory for creating Extractor instances from a framework name.
"""
import structlog

from suitediff.extraction.frameworks import BlockStyleExtractor, ScenarioStyleExtractor
from suitediff.extraction.protocols import Extractor

log = structlog.get_logger("extraction.factory")

EXTRACTOR_MAP = {
    "mocha": BlockStyleExtractor,
    "cypress": BlockStyleExtractor,
    "cypress.io": BlockStyleExtractor,
    "cypressio": BlockStyleExtractor,
    "jest": BlockStyleExtractor,
    "jasmine": BlockStyleExtractor,
    "codecept": ScenarioStyleExtractor,
    "codeceptjs": ScenarioStyleExtractor,
}
DEFAULT_EXTRACTOR = BlockStyleExtractor


def get_extractor(framework: str) -> Extractor:
    """
    Factory function to get the extractor for a framework name.

    Unknown frameworks fall back to the block-style extractor.
    """
    framework_key = framework.strip().lower()
    extractor_class = EXTRACTOR_MAP.get(framework_key)

    if not extractor_class:
        log.warning(
            "Unknown framework, falling back to block-style extraction",
            framework=framework,
            known=sorted(EXTRACTOR_MAP),
        )
        extractor_class = DEFAULT_EXTRACTOR

    log.debug("Instantiating extractor", framework=framework, extractor=extractor_class.__name__)
    return extractor_class()

# 🧪⚙️
