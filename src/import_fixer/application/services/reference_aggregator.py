import logging
from typing import Iterable

from import_fixer.domain.models.broken_reference import BrokenReference, BrokenReferenceIndex

logger = logging.getLogger(__name__)


class ReferenceAggregator:
    """Groups broken references by missing type."""

    def aggregate(self, references: Iterable[BrokenReference]) -> BrokenReferenceIndex:
        """
        Consumes the whole reference stream and returns the grouped index.
        The result does not depend on the order of the references.
        """
        index = BrokenReferenceIndex()
        count = 0
        for reference in references:
            index.add(reference)
            count += 1
        logger.debug("Aggregated %d references into %d missing types.", count, len(index))
        return index
