"""String case conversion and manipulation helpers."""

import random
import re

from dxutils.constants import DEFAULT_RANDOM_STRING_LENGTH, RANDOM_STRING_CHARACTERS

_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z0-9])")
_CAPITAL_LETTER = re.compile(r"([A-Z])")
_WHITESPACE_RUN = re.compile(r"\s{2,}")


def _split_on_boundaries(camel_case: str, splitter: str) -> str:
    # Callable replacement so the splitter is never read as a group reference
    return _CASE_BOUNDARY.sub(
        lambda match: match.group(1) + splitter + match.group(2), camel_case
    )


def _split_components(text: str, splitter: str) -> list[str]:
    if splitter == "":
        return list(text) or [""]
    return text.split(splitter)


def _capitalise(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def get_camel_case_splitted_to_lower_case(camel_case: str = "", splitter: str = "") -> str:
    """Split a camelCase string into a lower case string joined by splitter.

    Args:
        camel_case: The string to split.
        splitter: Separator to insert, e.g. "", "-" or "_".

    Returns:
        The split string in lower case ("camelCase1" -> "camel_case_1").
    """
    return _split_on_boundaries(camel_case, splitter).lower()


def get_camel_case_splitted_to_upper_case(camel_case: str = "", splitter: str = "") -> str:
    """Split a camelCase string into an upper case string joined by splitter.

    Args:
        camel_case: The string to split.
        splitter: Separator to insert, e.g. "", "-" or "_".

    Returns:
        The split string in upper case ("camelCase" -> "CAMEL_CASE").
    """
    return _split_on_boundaries(camel_case, splitter).upper()


def convert_lower_case_to_camel_case(lower_case: str = "", splitter: str = "_") -> str:
    """Convert a splitter-separated string to camelCase.

    Args:
        lower_case: The string to convert.
        splitter: Separator between words. An empty splitter treats every
            character as a word.

    Returns:
        The converted string in camelCase.
    """
    components = _split_components(lower_case, splitter)
    first, rest = components[0], components[1:]
    return first.lower() + "".join(_capitalise(component) for component in rest)


def convert_lower_case_to_pascal_case(lower_case: str = "", splitter: str = "_") -> str:
    """Convert a splitter-separated string to PascalCase.

    Args:
        lower_case: The string to convert.
        splitter: Separator between words.

    Returns:
        The converted string in PascalCase.
    """
    components = _split_components(lower_case, splitter)
    return "".join(_capitalise(component) for component in components)


def convert_camel_case_to_pascal_case(camel_case: str = "") -> str:
    """Convert camelCase to PascalCase."""
    return camel_case[:1].upper() + camel_case[1:]


def convert_pascal_case_to_camel_case(pascal_case: str = "") -> str:
    """Convert PascalCase to camelCase."""
    return pascal_case[:1].lower() + pascal_case[1:]


def get_sentence_case(text: str, capitalise_every_word: bool = False) -> str:
    """Return 'Sentence case formatted like this'.

    Accepts camelCase, PascalCase, snake_case and kebab-case words.

    Args:
        text: The string to convert.
        capitalise_every_word: Capitalise the first character of every word,
            not just the first word.

    Returns:
        Sentence cased string.
    """
    sentence = _CAPITAL_LETTER.sub(r" \1", text)
    sentence = sentence.replace("-", " ").replace("_", " ")
    sentence = compact_whitespace(sentence)

    if capitalise_every_word:
        sentence = " ".join(_capitalise(word) for word in sentence.split(" "))
    else:
        sentence = _capitalise(sentence)

    return compact_whitespace(sentence)


def compact_whitespace(text: str) -> str:
    """Compact consecutive whitespace into a single space and trim."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def generate_random_string(length: int = DEFAULT_RANDOM_STRING_LENGTH) -> str:
    """Return a random alphanumeric string of the given length."""
    if length <= 0:
        return ""
    return "".join(random.choices(RANDOM_STRING_CHARACTERS, k=length))
