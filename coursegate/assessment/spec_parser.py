"""
Test Specification Parser.

Extracts sections from a QTI-style assessment test document. Per
<qti-assessment-section> block, in document order:
- the section's own identifier (opening tag attribute)
- shuffle: <qti-ordering shuffle="true"/>
- select: <qti-selection select="N"/> (positive integers only)
- item refs: identifiers of <qti-assessment-item-ref/> elements
"""

from __future__ import annotations

import re
from typing import Optional

from loguru import logger

from coursegate.core.errors import MissingSectionIdentifier

from .models import TestSection


class TestSpecParser:
    """Parser for assessment test specification documents."""

    __test__ = False  # not a pytest test class

    # Patterns for extracting structure
    TEST_PATTERN = re.compile(r"<qti-assessment-test\b([^>]*)>", re.IGNORECASE)
    SECTION_PATTERN = re.compile(
        r"<qti-assessment-section\b([^>]*)>(.*?)</qti-assessment-section>",
        re.DOTALL | re.IGNORECASE,
    )
    # Attribute values may be single- or double-quoted
    IDENTIFIER_ATTR_PATTERN = re.compile(r"(?:^|\s)identifier\s*=\s*(?P<quote>[\"'])(?P<value>.*?)(?P=quote)")
    SHUFFLE_PATTERN = re.compile(r"<qti-ordering\b[^>]*\bshuffle\s*=\s*([\"'])true\1", re.IGNORECASE)
    SELECTION_PATTERN = re.compile(
        r"<qti-selection\b[^>]*\bselect\s*=\s*(?P<quote>[\"'])(?P<value>.*?)(?P=quote)", re.IGNORECASE
    )
    ITEM_REF_PATTERN = re.compile(r"<qti-assessment-item-ref\b([^>]*)>", re.IGNORECASE)

    def parse_test_identifier(self, spec_text: str) -> Optional[str]:
        """Return the identifier of the <qti-assessment-test> element, if any."""
        match = self.TEST_PATTERN.search(spec_text or "")
        if not match:
            return None
        return self._identifier_attr(match.group(1))

    def parse_sections(self, spec_text: str) -> list[TestSection]:
        """
        Parse every section of a test specification.

        Zero sections is not an error: the caller switches to
        pass-through mode.

        Raises:
            MissingSectionIdentifier: If a shuffled section has no identifier
        """
        sections: list[TestSection] = []

        for index, match in enumerate(self.SECTION_PATTERN.finditer(spec_text or "")):
            attrs, body = match.group(1), match.group(2)
            identifier = self._identifier_attr(attrs)
            shuffle = bool(self.SHUFFLE_PATTERN.search(body))

            if shuffle and not identifier:
                logger.error(f"Missing identifier on shuffled section {index}")
                raise MissingSectionIdentifier("shuffled section missing identifier", section_index=index)

            item_refs = []
            for ref in self.ITEM_REF_PATTERN.finditer(body):
                ref_id = self._identifier_attr(ref.group(1))
                if ref_id:
                    item_refs.append(ref_id)

            section = TestSection(
                identifier=identifier,
                shuffle=shuffle,
                select_count=self._select_count(body, identifier, index),
                item_refs=tuple(item_refs),
            )
            logger.debug(
                f"Parsed section {index} ({identifier}): {len(item_refs)} item refs, "
                f"shuffle={shuffle}, select={section.select_count}"
            )
            sections.append(section)

        return sections

    def _identifier_attr(self, attrs: str) -> Optional[str]:
        match = self.IDENTIFIER_ATTR_PATTERN.search(attrs)
        if match and match.group("value").strip():
            return match.group("value").strip()
        return None

    def _select_count(self, body: str, identifier: Optional[str], index: int) -> Optional[int]:
        match = self.SELECTION_PATTERN.search(body)
        if not match:
            return None

        raw = match.group("value").strip()
        try:
            count = int(raw)
        except ValueError:
            count = None

        if count is None or count <= 0:
            # Configuration error, non-fatal: the section is used without a cap
            logger.warning(f"Invalid select directive {raw!r} on section {index} ({identifier}); treating as no cap")
            return None
        return count


_default_parser = TestSpecParser()


def parse_sections(spec_text: str) -> list[TestSection]:
    """Parse sections with the default parser."""
    return _default_parser.parse_sections(spec_text)


def parse_test_identifier(spec_text: str) -> Optional[str]:
    """Read the test identifier with the default parser."""
    return _default_parser.parse_test_identifier(spec_text)
