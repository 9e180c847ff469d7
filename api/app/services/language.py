import re
from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    ENGLISH = "english"
    HINDI = "hindi"
    MARATHI = "marathi"


class Script(str, Enum):
    LATIN = "latin"
    DEVANAGARI = "devanagari"


@dataclass(frozen=True)
class LanguageTag:
    language: Language
    script: Script


DEVANAGARI_RE = re.compile(r"[\u0900-\u097F]")

# Characters and suffixes that show up in Marathi but rarely in Hindi
MARATHI_DEVANAGARI_RE = re.compile(r"[ळऱ]|ला\s|ची\s|चे\s|चा\s|ण्या|ळा|ळे|झाल")

MARATHI_WORDS = (
    "kay", "kasa", "kaay", "aahe", "mala", "tula", "amhi", "tumhi", "majha",
    "tuza", "nahi", "honar", "zala", "mhanun", "pan", "ani", "sarva", "kiti",
    "koni", "kuthe", "kadhi", "kashala", "bara", "chhan", "bhau", "tai",
    "dada", "aai", "baba", "zhala", "zali", "zale", "kashi", "kahich",
    "kahitari", "watla", "ashi", "asa", "ase",
)

HINDI_WORDS = (
    "kya", "kaise", "kaisa", "hai", "hain", "mujhe", "tujhe", "hum", "tum",
    "mera", "tera", "nahi", "hoga", "hua", "isliye", "lekin", "aur", "sab",
    "kitna", "kaun", "kaha", "kab", "kyun", "thik", "achha", "bhai", "didi",
    "maa", "papa", "hogaya", "hogayi", "hogaye", "kabhi", "kaisi", "kuch",
    "kuchh", "laga", "aisa", "aisi", "aise",
)


def _word_pattern(words: tuple[str, ...]) -> re.Pattern:
    return re.compile(r"\b(?:" + "|".join(words) + r")\b", re.IGNORECASE)


MARATHI_WORDS_RE = _word_pattern(MARATHI_WORDS)
HINDI_WORDS_RE = _word_pattern(HINDI_WORDS)


def detect_language(text: str) -> LanguageTag:
    """Best-effort guess of the language and script the user wrote in.

    Devanagari text is Hindi unless it carries Marathi-only letters or
    suffixes. Latin text is checked against Romanized Marathi and Hindi word
    lists; when both match, the list with strictly more hits wins and ties go
    to Hindi. Anything else is English.
    """
    if DEVANAGARI_RE.search(text):
        if MARATHI_DEVANAGARI_RE.search(text):
            return LanguageTag(Language.MARATHI, Script.DEVANAGARI)
        return LanguageTag(Language.HINDI, Script.DEVANAGARI)

    marathi_hits = len(MARATHI_WORDS_RE.findall(text))
    hindi_hits = len(HINDI_WORDS_RE.findall(text))

    if marathi_hits and not hindi_hits:
        return LanguageTag(Language.MARATHI, Script.LATIN)
    if hindi_hits and not marathi_hits:
        return LanguageTag(Language.HINDI, Script.LATIN)
    if marathi_hits and hindi_hits:
        if marathi_hits > hindi_hits:
            return LanguageTag(Language.MARATHI, Script.LATIN)
        return LanguageTag(Language.HINDI, Script.LATIN)

    return LanguageTag(Language.ENGLISH, Script.LATIN)
