"""
Lexicon of irregular conjugated forms.

The lexicon stores literal surface forms for (root, focus, aspect) triples
whose behavior the regular rules do not derive: irregular stems (dala -> dalhin,
kuha -> kunin), roots conjugated with the i- prefix (bigay, turo), and roots
whose idiomatic forms come from another affix pattern (punta).

Lexicon data files map each root to ``"focus:aspect"`` keys::

    {"dala": {"in:infinitive": "dalhin", "in:contemplated": "dadalhin"}}

A ``Lexicon`` never changes after construction. Extending one with
``merged`` returns a new instance.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from banghay.core.constants import (
    DEFAULT_LEXICON_FILE,
    ERROR_INVALID_LEXICON_FORM,
    ERROR_INVALID_LEXICON_KEY,
    LEXICON_KEY_SEPARATOR,
)
from banghay.core.exceptions import InvalidConjugationArgument, LexiconFormatError
from banghay.core.models import Aspect, ConjugationKey, Focus, coerce_aspect, coerce_focus
from banghay.core.utils import get_file_contents, read_data_file

logger = logging.getLogger(__name__)

EntryKey = Tuple[str, Focus, Aspect]


def _parse_lexicon_key(root: str, key: Any) -> Tuple[Focus, Aspect]:
    if not isinstance(key, str) or key.count(LEXICON_KEY_SEPARATOR) != 1:
        raise LexiconFormatError(ERROR_INVALID_LEXICON_KEY.format(key=key, root=root))
    focus_name, aspect_name = key.split(LEXICON_KEY_SEPARATOR)
    try:
        return coerce_focus(focus_name), coerce_aspect(aspect_name)
    except InvalidConjugationArgument as exc:
        raise LexiconFormatError(ERROR_INVALID_LEXICON_KEY.format(key=key, root=root)) from exc


class Lexicon:
    """Immutable table of (root, focus, aspect) -> surface form overrides."""

    def __init__(self, entries: Optional[Mapping[EntryKey, str]] = None) -> None:
        self._entries: Mapping[EntryKey, str] = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, str]]) -> "Lexicon":
        """
        Build a lexicon from the nested data-file structure.

        Args:
            data: Mapping of root -> {"focus:aspect": form}

        Returns:
            Lexicon: The parsed lexicon

        Raises:
            LexiconFormatError: If a key or form is malformed
        """
        if not isinstance(data, Mapping):
            raise LexiconFormatError("Lexicon data must be a mapping of roots to forms.")

        entries: Dict[EntryKey, str] = {}
        for root, forms in data.items():
            if not isinstance(root, str) or not root or not isinstance(forms, Mapping):
                raise LexiconFormatError(f"Invalid lexicon entry for root {root!r}.")
            for key, form in forms.items():
                focus, aspect = _parse_lexicon_key(root, key)
                if not isinstance(form, str) or not form:
                    raise LexiconFormatError(ERROR_INVALID_LEXICON_FORM.format(root=root, key=key))
                entries[(root, focus, aspect)] = form
        return cls(entries)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Lexicon":
        """Load a lexicon from a JSON file on disk."""
        try:
            data = json.loads(get_file_contents(path))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise LexiconFormatError(f"Lexicon file {path} is not valid UTF-8 JSON: {exc}") from exc
        lexicon = cls.from_mapping(data)
        logger.info("Loaded %d lexicon overrides from %s", len(lexicon), path)
        return lexicon

    @classmethod
    def load_default(cls) -> "Lexicon":
        """Load the lexicon shipped with the package."""
        return cls.from_mapping(read_data_file(DEFAULT_LEXICON_FILE))

    @classmethod
    def empty(cls) -> "Lexicon":
        return cls()

    def lookup(self, root: str, focus: Focus, aspect: Aspect) -> Optional[str]:
        """
        Look up the override for a triple.

        Returns:
            The literal surface form, or None when the regular rules apply
        """
        return self._entries.get((root, focus, aspect))

    def entries_for(self, root: str) -> Dict[ConjugationKey, str]:
        """Return every override stored for one root."""
        return {
            ConjugationKey(root=entry_root, focus=focus, aspect=aspect): form
            for (entry_root, focus, aspect), form in self._entries.items()
            if entry_root == root
        }

    def keys(self) -> List[ConjugationKey]:
        return [
            ConjugationKey(root=root, focus=focus, aspect=aspect)
            for root, focus, aspect in sorted(self._entries, key=lambda k: (k[0], k[1].value, k[2].value))
        ]

    def roots(self) -> List[str]:
        return sorted({root for root, _, _ in self._entries})

    def merged(self, other: "Lexicon") -> "Lexicon":
        """
        Return a new lexicon holding this lexicon's entries extended by ``other``.

        On a conflicting key the entry from ``other`` wins.
        """
        entries = dict(self._entries)
        for key, form in other._entries.items():
            current = entries.get(key)
            if current is not None and current != form:
                root, focus, aspect = key
                logger.warning(
                    "Lexicon override for %s (%s:%s) replaced: %s -> %s",
                    root,
                    focus.value,
                    aspect.value,
                    current,
                    form,
                )
            entries[key] = form
        return Lexicon(entries)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, ConjugationKey):
            return False
        return (key.root, key.focus, key.aspect) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon(roots={len(self.roots())}, entries={len(self)})"


DEFAULT_LEXICON = Lexicon.load_default()
