from dataclasses import dataclass
from enum import Enum

from app.services.language import Language, LanguageTag, Script, detect_language


class RoastLevel(str, Enum):
    SOFT = "soft"
    MEDIUM = "medium"
    BRUTAL = "brutal"

    @classmethod
    def parse(cls, value: str) -> "RoastLevel":
        """Case-insensitive lookup. Raises ValueError for unknown levels."""
        return cls(value.lower())


SYSTEM_PROMPTS = {
    RoastLevel.SOFT: """You are a friendly comedian who gently teases people.
- Use playful, lighthearted humor
- Keep it wholesome but still funny
- Like a friend who lovingly makes fun of you
- Use mild sarcasm and clever wordplay
- Make them chuckle, not cry""",
    RoastLevel.MEDIUM: """You are a stand-up comedian known for bold, sarcastic roasts.
- Be witty and cutting but not cruel
- Use sharp observations and clever burns
- Reference their flaws creatively
- Make it sting a little but in a fun way
- Like a roast battle with some heat""",
    RoastLevel.BRUTAL: """You are a SAVAGE roast master with NO MERCY.
- Go ABSOLUTELY BRUTAL - make them question their life choices
- Attack their profession, dreams, and everything they told you
- Use dark humor, devastating burns, and savage observations
- Make it so harsh they might need therapy after
- Be creative with insults - hit where it hurts
- Reference their "about" section to make it deeply personal
- Make them feel called out on a spiritual level
- Like a verbal destruction with no survivors
- BUT NEVER use slurs, hate speech, or genuinely harmful content""",
}

TONE_RULES = {
    RoastLevel.SOFT: "Keep it playful and fun",
    RoastLevel.MEDIUM: "Be bold and sarcastic",
    RoastLevel.BRUTAL: "Be absolutely SAVAGE and RUTHLESS",
}

TEMPERATURES = {
    RoastLevel.SOFT: 0.7,
    RoastLevel.MEDIUM: 0.8,
    RoastLevel.BRUTAL: 0.9,
}

ENGLISH_INSTRUCTION = "Respond in English with modern, relatable humor."

LANGUAGE_INSTRUCTIONS = {
    LanguageTag(Language.MARATHI, Script.DEVANAGARI): """IMPORTANT: The user has written in Marathi (Devanagari script).
You MUST respond entirely in Marathi using Devanagari script (मराठी).
Use authentic Marathi phrases, slang, and expressions for the roast.
Example: "अरे बाबा", "काय रे", "भावा", "मग काय\"""",
    LanguageTag(Language.MARATHI, Script.LATIN): """IMPORTANT: The user has written in Marathi using English letters (transliterated).
You MUST respond in Marathi but written in English letters (Roman Marathi/Romanized Marathi).
Use authentic Marathi phrases and slang written in English.
Example: "Arre baba", "Kay re", "Bhava", "Mag kay", "Kiti bore aahe\"""",
    LanguageTag(Language.HINDI, Script.DEVANAGARI): """IMPORTANT: The user has written in Hindi (Devanagari script).
You MUST respond entirely in Hindi using Devanagari script (हिंदी).
Use authentic Hindi phrases, slang, and expressions for the roast.
Example: "अरे भाई", "क्या बात है", "बंदे", "भइया\"""",
    LanguageTag(Language.HINDI, Script.LATIN): """IMPORTANT: The user has written in Hindi using English letters (transliterated).
You MUST respond in Hindi but written in English letters (Hinglish/Romanized Hindi).
Use authentic Hindi phrases and slang written in English.
Example: "Arre bhai", "Kya baat hai", "Bande", "Bhaiya", "Kitna boring hai\"""",
}

USER_TEMPLATE = """Roast this person based on the following info:

Name: {name}
Profession: {profession}
About them: {about}
Roast Level: {level_label}

{language_instruction}

Instructions:
- Write 4-6 lines of roast
- Make it personal using the info provided
- {tone_rule}
- Use humor and references appropriate to the detected language
- Each line should be a separate burn
- End with a devastating closer
- DO NOT include any disclaimers or apologies
- DO NOT break character
- STRICTLY follow the language instruction above"""


@dataclass(frozen=True)
class RoastPrompt:
    system: str
    user: str
    language: LanguageTag
    temperature: float


def language_instruction(tag: LanguageTag) -> str:
    return LANGUAGE_INSTRUCTIONS.get(tag, ENGLISH_INSTRUCTION)


def build_prompt(
    name: str, profession: str, about: str, level: RoastLevel | str
) -> RoastPrompt:
    """Compose the system and user instructions for one roast.

    ``level`` may be a RoastLevel or a raw string; anything unrecognised is
    treated as medium.
    """
    try:
        level = RoastLevel.parse(level)
    except (ValueError, AttributeError):
        level = RoastLevel.MEDIUM

    tag = detect_language(f"{name} {profession} {about}")

    user = USER_TEMPLATE.format(
        name=name,
        profession=profession,
        about=about or "No additional info provided",
        level_label=level.value.upper(),
        language_instruction=language_instruction(tag),
        tone_rule=TONE_RULES[level],
    )

    return RoastPrompt(
        system=SYSTEM_PROMPTS[level],
        user=user,
        language=tag,
        temperature=TEMPERATURES[level],
    )
