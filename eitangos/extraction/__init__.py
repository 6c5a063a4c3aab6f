"""
Extraction module.

Turns post text into vocabulary pairs.
"""

from eitangos.extraction.extractor import (
    VocabularyExtractor,
    clean_text,
    extract_vocabulary,
    TARGET_SCRIPT_PATTERN,
    SOURCE_SCRIPT_PATTERN,
)

__all__ = [
    "VocabularyExtractor",
    "clean_text",
    "extract_vocabulary",
    "TARGET_SCRIPT_PATTERN",
    "SOURCE_SCRIPT_PATTERN",
]
