"""wftslang: Phonology and morphology of the constructed languages of WFTS."""

__version__ = "0.1.0"

from wftslang.errors import ParseError, PhonologyError, ValidationError
from wftslang.inventory.models import Inventory, Phoneme, PhonemeClass
from wftslang.languages import LANGUAGES, Language, get_language
from wftslang.phonetics import Transcription, Variation, pronounce_words
from wftslang.phonology import Coda, Onset, Syllable, Template, Word


def parse_word(text: str, language: str) -> Word:
    """Parse orthographic text of a registered language into a Word.

    Args:
        text: Orthographic spelling; ``'``, ``-`` or ``.`` force syllable
            breaks.
        language: Language code (e.g., 'star', 'div').

    Raises:
        UnknownLanguageError: If the language is not registered.
        ParseError: If the text cannot be read as a legal word.
    """
    return Word.parse_str(text, get_language(language))


__all__ = [
    "Coda",
    "Inventory",
    "LANGUAGES",
    "Language",
    "Onset",
    "ParseError",
    "Phoneme",
    "PhonemeClass",
    "PhonologyError",
    "Syllable",
    "Template",
    "Transcription",
    "ValidationError",
    "Variation",
    "Word",
    "__version__",
    "get_language",
    "parse_word",
    "pronounce_words",
]
