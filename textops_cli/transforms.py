"""Pure string transforms behind each operation kind.

Word splitting shared by snake_case and camelCase:

- any run of characters that are neither letters, digits nor combining marks
  separates words
- a lowercase (or caseless) letter followed by an uppercase letter starts a word
- in an uppercase run followed by a lowercase letter, the last uppercase letter
  starts the word ("HTTPServer" -> "HTTP", "Server")
- letter/digit transitions start a word in both directions

    >>> split_words("XMLHttpRequest v2")
    ['XML', 'Http', 'Request', 'v', '2']
"""

from __future__ import annotations

import re
import unicodedata

_SEP = 0
_LOWER = 1
_UPPER = 2
_DIGIT = 3
_MARK = 4

# Latin letters NFKD does not decompose to ASCII.
_LATIN_EXTRAS = str.maketrans(
    {
        "ß": "ss",
        "æ": "ae",
        "ø": "o",
        "œ": "oe",
        "ł": "l",
        "đ": "d",
        "ð": "d",
        "þ": "th",
    }
)

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def _char_class(ch: str) -> int:
    if ch.isdigit():
        return _DIGIT
    if ch.isalpha():
        return _UPPER if ch.isupper() else _LOWER
    if unicodedata.category(ch).startswith("M"):
        return _MARK
    return _SEP


def _starts_word(prev: int, cur: int, nxt: int) -> bool:
    if (prev == _DIGIT) != (cur == _DIGIT):
        return True
    if prev == _LOWER and cur == _UPPER:
        return True
    return prev == _UPPER and cur == _UPPER and nxt == _LOWER


def split_words(text: str) -> list[str]:
    # Composed form keeps accented letters in one piece.
    text = unicodedata.normalize("NFC", text)
    classes = [_char_class(ch) for ch in text]
    marks = [cls == _MARK for cls in classes]
    for i, cls in enumerate(classes):
        if cls == _MARK:
            # Combining marks stay with the character they follow.
            classes[i] = classes[i - 1] if i and classes[i - 1] != _SEP else _LOWER
    words: list[str] = []
    current: list[str] = []
    for i, ch in enumerate(text):
        cur = classes[i]
        if cur == _SEP:
            if current:
                words.append("".join(current))
                current = []
            continue
        if current and not marks[i]:
            j = i + 1
            while j < len(text) and marks[j]:
                j += 1
            nxt = classes[j] if j < len(text) else _SEP
            if _starts_word(classes[i - 1], cur, nxt):
                words.append("".join(current))
                current = []
        current.append(ch)
    if current:
        words.append("".join(current))
    return words


def upper_case(text: str) -> str:
    return text.upper()


def lower_case(text: str) -> str:
    return text.lower()


def no_spaces(text: str) -> str:
    return "".join(ch for ch in text if not ch.isspace())


def snake_case(text: str) -> str:
    return "_".join(w.lower() for w in split_words(text))


def camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    head, tail = words[0], words[1:]
    return head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in tail)


def slugify(text: str) -> str:
    """Lowercase, ASCII-only, hyphen-separated form of ``text``.

    Accented letters fold to their base letter; anything else that is not
    ``[a-z0-9]`` collapses into a single hyphen.

        >>> slugify("Crème Brûlée, s'il vous plaît!")
        'creme-brulee-s-il-vous-plait'
    """
    folded = unicodedata.normalize("NFKD", text.lower().translate(_LATIN_EXTRAS))
    ascii_text = folded.encode("ascii", "ignore").decode("ascii")
    return _SLUG_SEPARATORS.sub("-", ascii_text).strip("-")
