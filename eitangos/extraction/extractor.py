"""
Vocabulary extraction from post text.

A vocabulary post looks like "make a shift シフトの作成": an English term
followed by its Japanese translation. Posts carry no reliable delimiter
between the two halves (ordinary space, full-width space, or none at all),
so the split point is the first Japanese character.

Algorithm:
1. Clean the text: drop URLs, @mentions and #hashtags, then trim.
2. Find the first Hiragana, Katakana or CJK ideograph. None -> no pair.
3. Everything before it is the term, everything from it on is the
   translation. Trim both.
4. The term must contain a Latin letter and the translation a Japanese
   character, otherwise no pair.

Extraction never raises: anything that is not a vocabulary post yields None.
"""

import re
from typing import Optional, Union

from eitangos.models.vocabulary import VocabularyPair


# Hiragana, Katakana, CJK Unified Ideographs
TARGET_SCRIPT_PATTERN = re.compile(r"[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]")

# Basic Latin letters
SOURCE_SCRIPT_PATTERN = re.compile(r"[a-zA-Z]")

# Noise removed before segmentation, applied in this order.
# \w is ASCII-only so a mention glued to Japanese text ("@bob猫")
# does not swallow the translation.
URL_PATTERN = re.compile(r"https?://\S+")
MENTION_PATTERN = re.compile(r"@\w+", re.ASCII)
HASHTAG_PATTERN = re.compile(r"#\w+", re.ASCII)

NOISE_PATTERNS = (URL_PATTERN, MENTION_PATTERN, HASHTAG_PATTERN)


def _strip_noise(text: str) -> str:
    for pattern in NOISE_PATTERNS:
        text = pattern.sub("", text)
    return text


def clean_text(text: str) -> str:
    """
    Remove URLs, mentions and hashtags, then trim surrounding whitespace.
    
    Removal repeats until nothing more matches, so that a match exposed by
    an earlier removal ("http@x://y" -> "http://y") is also dropped and
    cleaning an already-clean string is a no-op.
    
    Args:
        text: Raw post text.
        
    Returns:
        Cleaned text (possibly empty).
    """
    previous = None
    while text != previous:
        previous = text
        text = _strip_noise(text)
    return text.strip()


class VocabularyExtractor:
    """
    Splits post text into a (term, translation) pair.
    
    The character classes are parameters so the same splitter can serve
    other script pairs; the defaults are English -> Japanese.
    
    Usage:
        extractor = VocabularyExtractor()
        pair = extractor.extract("cat 猫")   # VocabularyPair("cat", "猫")
        extractor.extract("good morning!")  # None
    """
    
    def __init__(
        self,
        target_pattern: Union[str, re.Pattern] = TARGET_SCRIPT_PATTERN,
        source_pattern: Union[str, re.Pattern] = SOURCE_SCRIPT_PATTERN,
    ):
        """
        Initialize the extractor.
        
        Args:
            target_pattern: Matches one translation-script character.
            source_pattern: Matches one term-script character.
        """
        self.target_pattern = re.compile(target_pattern)
        self.source_pattern = re.compile(source_pattern)
    
    def find_split_index(self, text: str) -> Optional[int]:
        """Return the index of the first translation-script character, or None."""
        match = self.target_pattern.search(text)
        return match.start() if match else None
    
    def is_valid(self, term: str, translation: str) -> bool:
        """Check both halves of a candidate pair."""
        if not term or not translation:
            return False
        if not self.source_pattern.search(term):
            return False
        if not self.target_pattern.search(translation):
            return False
        return True
    
    def extract(self, raw_text: str) -> Optional[VocabularyPair]:
        """
        Extract a vocabulary pair from post text.
        
        Args:
            raw_text: Post text as fetched.
            
        Returns:
            VocabularyPair if the post is a vocabulary announcement, None otherwise.
        """
        if not isinstance(raw_text, str):
            return None
        
        cleaned = clean_text(raw_text)
        
        index = self.find_split_index(cleaned)
        if index is None:
            return None
        
        # Split first, trim each half after
        term = cleaned[:index].strip()
        translation = cleaned[index:].strip()
        
        if not self.is_valid(term, translation):
            return None
        
        return VocabularyPair(term=term, translation=translation)
    
    def __call__(self, raw_text: str) -> Optional[VocabularyPair]:
        return self.extract(raw_text)
    
    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} "
            f"target={self.target_pattern.pattern!r} "
            f"source={self.source_pattern.pattern!r}>"
        )


# Default extractor for module-level use
_default_extractor = VocabularyExtractor()


def extract_vocabulary(raw_text: str) -> Optional[VocabularyPair]:
    """
    Extract a vocabulary pair using the default English/Japanese extractor.
    
    Convenience wrapper around VocabularyExtractor.extract().
    """
    return _default_extractor.extract(raw_text)
