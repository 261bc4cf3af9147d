"""Text folding shared by French collation and free-text search."""

import unicodedata

# Ligatures have no decomposition; typographic apostrophes collate like "'"
_EXPANSIONS = str.maketrans({
    "œ": "oe",
    "æ": "ae",
    "’": "'",
    "‘": "'",
    "ʼ": "'",
})


def fold(value: str | None) -> str:
    """Case- and accent-insensitive form of *value* ("Éléphant" -> "elephant").

    Combining marks are stripped after NFD decomposition so accented letters
    compare equal to their base letter. "Œuvres" folds to "oeuvres" and
    "d’orientation" to "d'orientation". Arabic text keeps its letters and only
    loses harakat, which are combining marks too.
    """
    if not value:
        return ""
    s = unicodedata.normalize("NFD", str(value))
    s = "".join(ch for ch in s if unicodedata.category(ch) != "Mn")
    return s.casefold().translate(_EXPANSIONS)
