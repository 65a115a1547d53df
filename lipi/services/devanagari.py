"""
Romanized (ITRANS-like) to Devanagari transliteration.

Pure text transform: no I/O, no state shared between calls. Tables are
ordered tuples, longest key first, so the first hit is always the longest
match at a position.
"""
import re
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

HALANT = "्"

# Longest keys first. Matching relies on this order.
CONSONANTS: Tuple[Tuple[str, str], ...] = (
    ("chh", "छ"),
    ("kh", "ख"),
    ("gh", "घ"),
    ("ch", "च"),
    ("jh", "झ"),
    ("th", "थ"),
    ("dh", "ध"),
    ("ph", "फ"),
    ("bh", "भ"),
    ("sh", "श"),
    ("ng", "ङ"),
    ("nj", "ञ"),
    ("k", "क"),
    ("g", "ग"),
    ("c", "च"),
    ("j", "ज"),
    ("t", "त"),
    ("d", "द"),
    ("n", "न"),
    ("p", "प"),
    ("b", "ब"),
    ("m", "म"),
    ("y", "य"),
    ("r", "र"),
    ("l", "ल"),
    ("v", "व"),
    ("w", "व"),
    ("s", "स"),
    ("h", "ह"),
    # nukta loan sounds
    ("f", "फ़"),
    ("z", "ज़"),
    ("q", "क़"),
)

# key, standalone vowel, matra
VOWELS: Tuple[Tuple[str, str, str], ...] = (
    ("aa", "आ", "ा"),
    ("ai", "ऐ", "ै"),
    ("au", "औ", "ौ"),
    ("ee", "ई", "ी"),
    ("oo", "ऊ", "ू"),
    ("a", "अ", ""),
    ("i", "इ", "ि"),
    ("u", "उ", "ु"),
    ("e", "ए", "े"),
    ("o", "ओ", "ो"),
)

PASSTHROUGH_RE = re.compile(r"[\s\d.,!?;:\-_()₹/\\@#$%^&*+=]")


class ScanState(Enum):
    IDLE = "idle"
    PENDING_CONSONANT = "pending_consonant"


class TokenKind(str, Enum):
    VOWEL = "vowel"
    CONSONANT = "consonant"
    PASSTHROUGH = "passthrough"
    UNKNOWN = "unknown"


class Token(NamedTuple):
    kind: TokenKind
    source: str
    output: str


def is_passthrough(ch: str) -> bool:
    return bool(PASSTHROUGH_RE.match(ch))


def match_vowel(text: str, pos: int) -> Optional[Tuple[str, str, str]]:
    for entry in VOWELS:
        if text.startswith(entry[0], pos):
            return entry
    return None


def match_consonant(text: str, pos: int) -> Optional[Tuple[str, str]]:
    for entry in CONSONANTS:
        if text.startswith(entry[0], pos):
            return entry
    return None


def tokenize(text: Optional[str]) -> List[Token]:
    """
    Scan ``text`` left to right and return the tokens it was split into.

    Each token's ``output`` already carries any halant needed to close the
    consonant before it. A halant closing a consonant at the very end of the
    input is not part of any token; ``transliterate`` appends it.
    """
    text = (text or "").lower()
    tokens: List[Token] = []
    state = ScanState.IDLE
    i = 0
    while i < len(text):
        pending = state is ScanState.PENDING_CONSONANT
        ch = text[i]

        if is_passthrough(ch):
            tokens.append(Token(TokenKind.PASSTHROUGH, ch, (HALANT if pending else "") + ch))
            state = ScanState.IDLE
            i += 1
            continue

        vowel = match_vowel(text, i)
        if vowel:
            key, standalone, matra = vowel
            tokens.append(Token(TokenKind.VOWEL, key, matra if pending else standalone))
            state = ScanState.IDLE
            i += len(key)
            continue

        consonant = match_consonant(text, i)
        if consonant:
            key, glyph = consonant
            tokens.append(Token(TokenKind.CONSONANT, key, (HALANT if pending else "") + glyph))
            state = ScanState.PENDING_CONSONANT
            i += len(key)
            continue

        tokens.append(Token(TokenKind.UNKNOWN, ch, (HALANT if pending else "") + ch))
        state = ScanState.IDLE
        i += 1
    return tokens


def transliterate(text: Optional[str]) -> str:
    """Render romanized ``text`` in Devanagari. Never raises."""
    tokens = tokenize(text)
    out = "".join(t.output for t in tokens)
    # a bare consonant at the end keeps no inherent vowel
    if tokens and tokens[-1].kind is TokenKind.CONSONANT:
        out += HALANT
    return out
