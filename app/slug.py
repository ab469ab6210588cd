import re
import unicodedata

_SLUG_STRIP_RE = re.compile(r"[^\w\s-]")
_SLUG_SPACE_RE = re.compile(r"[\s_]+")
_SLUG_DASH_RE = re.compile(r"-+")

# Letters that NFD does not decompose into base + combining mark.
_TRANSLITERATE = str.maketrans({"đ": "d", "Đ": "d"})


def _fold_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text.translate(_TRANSLITERATE))
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def slugify(text: str) -> str:
    """Return a URL-safe, lowercase, ASCII slug derived from *text*.

    ``"Tin tức mới"`` becomes ``"tin-tuc-moi"``.  The result may be an
    empty string when *text* holds no letters or digits.
    """
    text = _fold_accents(text.lower().strip())
    text = text.encode("ascii", "ignore").decode("ascii")
    text = _SLUG_STRIP_RE.sub("", text)
    text = _SLUG_SPACE_RE.sub("-", text)
    return _SLUG_DASH_RE.sub("-", text).strip("-")


def fold_category_name(name: str) -> str:
    """Return the key under which category names are compared for uniqueness.

    Folding happens in Python so every backend sees the same key; SQLite's
    ``lower()`` only folds ASCII.
    """
    return unicodedata.normalize("NFC", name).casefold()
