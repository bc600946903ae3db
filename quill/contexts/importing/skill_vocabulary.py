"""
Known-skill vocabulary for the Importing context.

The vocabulary is a YAML table of technology names grouped by category
(data/skill_vocabulary.yaml, or QUILL_SKILL_VOCABULARY_PATH). Skills
extraction reports every term found anywhere in a résumé that has a skills
section. get_default_registry() lazily builds one shared registry per process.
"""

import os
import re
from pathlib import Path
from typing import Dict, List, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from quill.contexts.importing.extraction_patterns import vocabulary_term_pattern

load_dotenv()
DEFAULT_VOCABULARY_PATH = Path(__file__).parent / "data" / "skill_vocabulary.yaml"
VOCABULARY_PATH = Path(os.getenv("QUILL_SKILL_VOCABULARY_PATH", str(DEFAULT_VOCABULARY_PATH)))


class SkillVocabularyRegistry:
    """
    Registry for loading and caching the known-skill vocabulary.

    The vocabulary is a YAML table keyed by category (languages, frameworks,
    databases, ...) so it can grow without touching extraction logic. Terms
    are compiled to whole-word patterns once and cached.
    """

    def __init__(self, vocabulary_path: Path = None):
        """
        Initialize the vocabulary registry.

        Args:
            vocabulary_path: Path to the vocabulary YAML. Defaults to
                           QUILL_SKILL_VOCABULARY_PATH from environment
        """
        if vocabulary_path is None:
            vocabulary_path = VOCABULARY_PATH

        self.vocabulary_path = Path(vocabulary_path)
        self._categories: Dict[str, List[str]] = None
        self._version = None
        self._patterns: List[Tuple[str, re.Pattern]] = None

    def _load(self) -> None:
        """
        Load the vocabulary file.

        Raises:
            FileNotFoundError: If the vocabulary file doesn't exist
            ValueError: If the file has no `categories` mapping
        """
        if not self.vocabulary_path.exists():
            raise FileNotFoundError(f"Skill vocabulary not found at {self.vocabulary_path}")

        config = OmegaConf.to_container(OmegaConf.load(self.vocabulary_path), resolve=True)

        categories = config.get("categories")
        if not isinstance(categories, dict):
            raise ValueError(
                f"Skill vocabulary at {self.vocabulary_path} must define a 'categories' mapping"
            )

        self._categories = {
            name: [str(term) for term in (terms or [])] for name, terms in categories.items()
        }
        self._version = config.get("version")

    @property
    def categories(self) -> Dict[str, List[str]]:
        """Vocabulary terms grouped by category, in file order."""
        if self._categories is None:
            self._load()
        return self._categories

    @property
    def version(self):
        if self._categories is None:
            self._load()
        return self._version

    def get_terms(self) -> List[str]:
        """All terms across categories, deduplicated, in file order."""
        terms = (term for category_terms in self.categories.values() for term in category_terms)
        return list(dict.fromkeys(terms))

    def get_patterns(self) -> List[Tuple[str, re.Pattern]]:
        """(term, compiled whole-word pattern) pairs, compiled on first use."""
        if self._patterns is None:
            self._patterns = [(term, vocabulary_term_pattern(term)) for term in self.get_terms()]
        return self._patterns

    def find_terms(self, text: str) -> List[str]:
        """
        Find every vocabulary term that occurs in text.

        Args:
            text: Text to scan (typically the whole corpus)

        Returns:
            Matching terms in their canonical spelling, in vocabulary order
        """
        return [term for term, pattern in self.get_patterns() if pattern.search(text)]

    def clear_cache(self):
        """Forget loaded terms so the next access re-reads the file."""
        self._categories = None
        self._version = None
        self._patterns = None

    def is_loaded(self) -> bool:
        return self._categories is not None


_default_registry = None


def get_default_registry() -> SkillVocabularyRegistry:
    """Process-wide registry over the configured vocabulary file."""
    global _default_registry
    if _default_registry is None:
        _default_registry = SkillVocabularyRegistry()
    return _default_registry
