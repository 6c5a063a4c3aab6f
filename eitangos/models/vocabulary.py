"""
Core data model for the vocabulary monitor.

Defines the VocabularyPair dataclass: one English term together with its
Japanese translation, as extracted from a post and stored remotely.
"""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class VocabularyPair:
    """
    A single vocabulary entry.
    
    Pairs are compared for duplication on `term` alone, using exact,
    case-sensitive string equality. That rule is applied by the storage
    layer, not here.
    
    Attributes:
        term: The source-language (English) word or phrase.
        translation: The target-language (Japanese) rendering.
    """
    
    term: str
    translation: str
    
    def __post_init__(self) -> None:
        """Validate fields after initialization."""
        self.validate()
    
    def validate(self) -> None:
        """
        Validate that both fields are present.
        
        Raises:
            ValueError: If validation fails.
        """
        errors = []
        
        if not isinstance(self.term, str) or not self.term.strip():
            errors.append("term is required and cannot be empty")
        
        if not isinstance(self.translation, str) or not self.translation.strip():
            errors.append("translation is required and cannot be empty")
        
        if errors:
            raise ValueError(f"VocabularyPair validation failed: {'; '.join(errors)}")
    
    def to_dict(self) -> dict:
        """Convert to a plain dictionary."""
        return asdict(self)
    
    def to_fields(
        self,
        term_field: str = "english",
        translation_field: str = "japanese",
    ) -> dict:
        """
        Convert to the attribute names used by the remote collection.
        
        Args:
            term_field: Document attribute holding the term.
            translation_field: Document attribute holding the translation.
            
        Returns:
            Dictionary ready to send as document data.
        """
        return {
            term_field: self.term,
            translation_field: self.translation,
        }
    
    @classmethod
    def from_fields(
        cls,
        fields: dict,
        term_field: str = "english",
        translation_field: str = "japanese",
    ) -> "VocabularyPair":
        """
        Create a VocabularyPair from a remote document.
        
        Raises:
            ValueError: If either attribute is missing or empty.
        """
        return cls(
            term=fields.get(term_field, ""),
            translation=fields.get(translation_field, ""),
        )
    
    def __str__(self) -> str:
        return f"{self.term} → {self.translation}"
