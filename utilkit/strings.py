"""String helpers.

Case handling is Unicode aware. The configured encoding (see
:func:`utilkit.config.get_encoding`) is used wherever a byte representation
is involved, for instance :func:`length` with ``binary_safe=True``.
"""

from __future__ import annotations

import json
import re
import secrets
import unicodedata
import uuid

from .config import encoding_scope, get_encoding, set_encoding
from .core.exceptions import InvalidArgumentError

__all__ = [
    "get_encoding",
    "set_encoding",
    "encoding_scope",
    "title",
    "lower",
    "upper",
    "substr",
    "lcfirst",
    "ucfirst",
    "strcasecmp",
    "begins_with",
    "ends_with",
    "does_contain",
    "does_not_contain",
    "length",
    "camel_case",
    "ascii",
    "slugify",
    "random_bytes",
    "random_string",
    "valid_email",
    "valid_json",
    "obscure_email",
    "guid",
]

# Characters that do not decompose to ASCII under NFKD.
_TRANSLITERATIONS = {
    "Ä": "Ae", "ä": "ae", "Ö": "Oe", "ö": "oe", "Ü": "Ue", "ü": "ue",
    "Æ": "AE", "æ": "ae", "Ǽ": "AE", "ǽ": "ae", "Œ": "OE", "œ": "oe",
    "Ø": "O", "ø": "o", "Ǿ": "O", "ǿ": "o", "ß": "ss", "ſ": "s",
    "Ð": "Dj", "ð": "dj", "Đ": "Dj", "đ": "dj", "Ħ": "H", "ħ": "h",
    "Ł": "L", "ł": "l", "Ŀ": "L", "ŀ": "l", "Ŧ": "T", "ŧ": "t",
    "ı": "i", "ƒ": "f", "Þ": "Th", "þ": "th",
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "Dj", "Е": "E", "Ё": "E",
    "Ж": "Zh", "З": "Z", "И": "I", "Й": "J", "К": "K", "Л": "L", "М": "M",
    "Н": "N", "О": "O", "П": "P", "Р": "R", "С": "S", "Т": "T", "У": "U",
    "Ф": "F", "Х": "H", "Ц": "C", "Ч": "Ch", "Ш": "Sh", "Щ": "Shch",
    "Ъ": "", "Ы": "Y", "Ь": "", "Э": "E", "Ю": "Ju", "Я": "Ja",
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "dj", "е": "e", "ё": "e",
    "ж": "zh", "з": "z", "и": "i", "й": "j", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "h", "ц": "c", "ч": "ch", "ш": "sh", "щ": "shch",
    "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "ju", "я": "ja",
}
_TRANSLATION_TABLE = str.maketrans(_TRANSLITERATIONS)

_NON_PRINTABLE_ASCII = re.compile(r"[^\x20-\x7E]")
_CAMEL_SEPARATORS = re.compile(r"[-_\s]+(.)?")
_CAMEL_DIGITS = re.compile(r"\d+(.)?")
_WORD = re.compile(r"\w+(?:'\w+)*")
_EMAIL = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,63}$"
)


def title(value: str) -> str:
    """Upper-case the first letter of every word, lower-case the rest."""
    return _WORD.sub(lambda match: match.group(0).capitalize(), value)


def lower(value: str) -> str:
    return value.lower()


def upper(value: str) -> str:
    return value.upper()


def substr(value: str, start: int, length: int | None = None) -> str:
    """Return ``length`` characters from ``start``; negative values count from the end."""

    if start < 0:
        start = max(len(value) + start, 0)
    if length is None:
        return value[start:]
    if length < 0:
        return value[start:length]
    return value[start:start + length]


def lcfirst(value: str) -> str:
    return lower(value[:1]) + value[1:]


def ucfirst(value: str) -> str:
    return upper(value[:1]) + value[1:]


def strcasecmp(first: str, second: str) -> int:
    """Case-insensitive comparison returning -1, 0 or 1."""

    first, second = upper(first), upper(second)
    return (first > second) - (first < second)


def _prepare(haystack: str, needle: str, insensitive: bool) -> tuple[str, str]:
    if insensitive:
        return lower(haystack), lower(needle)
    return haystack, needle


def begins_with(haystack: str, needle: str, insensitive: bool = False) -> bool:
    haystack, needle = _prepare(haystack, needle, insensitive)
    return haystack.startswith(needle)


def ends_with(haystack: str, needle: str, insensitive: bool = False) -> bool:
    haystack, needle = _prepare(haystack, needle, insensitive)
    return haystack.endswith(needle)


def does_contain(haystack: str, needle: str, insensitive: bool = False) -> bool:
    haystack, needle = _prepare(haystack, needle, insensitive)
    return needle in haystack


def does_not_contain(haystack: str, needle: str, insensitive: bool = False) -> bool:
    return not does_contain(haystack, needle, insensitive)


def length(value: str, binary_safe: bool = False) -> int:
    """Return the number of characters, or of bytes in the current encoding."""

    if binary_safe:
        return len(value.encode(get_encoding(), errors="replace"))
    return len(value)


def camel_case(value: str) -> str:
    """Return a camelCase version of ``value``.

    >>> camel_case("background-color")
    'backgroundColor'
    """

    value = lcfirst(value.strip()).lstrip("-_")
    value = _CAMEL_SEPARATORS.sub(lambda match: upper(match.group(1) or ""), value)
    return _CAMEL_DIGITS.sub(lambda match: upper(match.group(0)), value)


def ascii(value: str) -> str:  # noqa: A001
    """Transliterate ``value`` to printable ASCII.

    Accented letters lose their marks, a handful of letters without a
    decomposition (German umlauts, ligatures, Cyrillic) are spelled out and
    anything else outside the printable range is dropped.
    """

    value = unicodedata.normalize("NFKD", value.translate(_TRANSLATION_TABLE))
    value = "".join(char for char in value if not unicodedata.combining(char))
    return _NON_PRINTABLE_ASCII.sub("", value)


def slugify(value: str, separator: str = "-") -> str:
    """Turn ``value`` into a URL and filesystem friendly slug.

    >>> slugify("This post -- it has a dash")
    'this-post-it-has-a-dash'
    """

    value = ascii(value).replace("@", f"{separator}at{separator}")
    quoted = re.escape(separator)
    opposite = "_" if separator == "-" else "-"
    value = re.sub(f"[{re.escape(opposite)}]+", separator, value)
    value = re.sub(rf"[^{quoted}\w\s]+", "", lower(value))
    value = re.sub(rf"[{quoted}\s]+", separator, value)
    return value.strip(separator)


def random_bytes(length: int) -> bytes:
    """Return ``length`` cryptographically secure random bytes."""

    if length < 1:
        raise InvalidArgumentError("length must be at least 1", details={"length": length})
    return secrets.token_bytes(length)


def random_string(length: int = 8) -> str:
    """Return a random hexadecimal string of ``length`` characters."""

    if length < 1:
        raise InvalidArgumentError("length must be at least 1", details={"length": length})
    return random_bytes(length).hex()[:length]


def valid_email(email: str) -> bool:
    return bool(_EMAIL.match(email)) and len(email) <= 254


def valid_json(data: str) -> bool:
    try:
        json.loads(data.strip())
    except ValueError:
        return False
    return True


def obscure_email(email: str) -> str:
    """Encode every character of an address as an HTML decimal entity."""

    if not valid_email(email):
        raise InvalidArgumentError("Invalid email specified.", details={"email": email})
    return "".join(f"&#{ord(char)};" for char in email)


def guid() -> str:
    """Return a random (version 4) UUID string."""
    return str(uuid.uuid4())
