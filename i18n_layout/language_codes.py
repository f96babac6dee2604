"""
Language code grammars and utilities.

Two surface syntaxes are recognised:
- Standard (JSON family): BCP 47 style, segments joined by '-' or '_',
  matched case-insensitively (en, fr-FR, zh-Hans-CN, ZH-hans-cn)
- ARB (Flutter): segments joined by '_' only, case-strict
  (en, en_US, zh_Hans_CN)

Both grammars share the same logical fields:
- language: 2-3 letters (mandatory)
- script: 4 letters, canonical form is title case (optional)
- region: 2-3 letters or 3 digits, canonical form is uppercase (optional)

The grammar in use is selected once from the localization file extension
and passed explicitly to everything that parses file or folder names.
"""

import re
from dataclasses import dataclass
from typing import Optional, Pattern

ARB_EXTENSION = ".arb"


@dataclass(frozen=True)
class LanguageCodeGrammar:
    """A language code grammar (standard or ARB)."""
    name: str
    pattern: Pattern[str]
    separator: str

    def matches(self, code: str) -> bool:
        return bool(code) and self.pattern.fullmatch(code) is not None


@dataclass(frozen=True)
class LanguageCode:
    """Parsed language code."""
    language: str
    script: Optional[str] = None
    region: Optional[str] = None


# ASCII only: IGNORECASE alone lets [a-z] match letters such as U+017F and U+212A
STANDARD = LanguageCodeGrammar(
    name="standard",
    pattern=re.compile(
        r"(?P<language>[a-z]{2,3})"
        r"(?:[-_](?P<script>[A-Z][a-z]{3}))?"
        r"(?:[-_](?P<region>[A-Z]{2,3}|[0-9]{3}))?",
        re.IGNORECASE | re.ASCII,
    ),
    separator="-",
)

# ARB codes are generated by tooling and compared literally, so no IGNORECASE
ARB = LanguageCodeGrammar(
    name="arb",
    pattern=re.compile(
        r"(?P<language>[a-z]{2,3})"
        r"(?:_(?P<script>[A-Z][a-z]{3}))?"
        r"(?:_(?P<region>[A-Z]{2,3}|[0-9]{3}))?"
    ),
    separator="_",
)

GRAMMARS = {grammar.name: grammar for grammar in (STANDARD, ARB)}


def is_arb_extension(extension: str) -> bool:
    """Check if a file extension (with leading dot) is the ARB format."""
    return extension == ARB_EXTENSION


def grammar_for_extension(extension: str) -> LanguageCodeGrammar:
    """
    Select the language code grammar for a localization file extension.

    Examples:
        >>> grammar_for_extension('.arb').name
        'arb'
        >>> grammar_for_extension('.json').name
        'standard'
    """
    return ARB if is_arb_extension(extension) else STANDARD


def validate_language_code(code: str, grammar: LanguageCodeGrammar = STANDARD) -> bool:
    """
    Check if a language code is well-formed for a grammar.

    Args:
        code: Language code (e.g., 'en', 'zh-Hans-CN', 'en_US')
        grammar: Grammar to validate against (standard by default)

    Returns:
        True if the whole string matches the grammar

    Examples:
        >>> validate_language_code('zh-Hans-CN')
        True
        >>> validate_language_code('x')
        False
        >>> validate_language_code('en-US', ARB)
        False
    """
    return grammar.matches(code)


def parse_language_code(code: str, grammar: LanguageCodeGrammar = STANDARD) -> Optional[LanguageCode]:
    """
    Split a language code into its language, script and region subtags.

    Subtags are returned with the casing found in the input.

    Returns:
        LanguageCode or None if the code does not match the grammar
    """
    if not code:
        return None

    match = grammar.pattern.fullmatch(code)
    if match is None:
        return None

    return LanguageCode(
        language=match.group("language"),
        script=match.group("script"),
        region=match.group("region"),
    )


def normalize_language_code(code: str) -> str:
    """
    Normalize a standard language code to its canonical casing.

    The language subtag is lowercased, the script is title-cased and the
    region is uppercased; subtags are joined with '-'. Codes that do not
    match the standard grammar are returned unchanged.

    Examples:
        >>> normalize_language_code('ZH-hans-CN')
        'zh-Hans-CN'
        >>> normalize_language_code('en_us')
        'en-US'
        >>> normalize_language_code('invalid-code')
        'invalid-code'
    """
    parsed = parse_language_code(code, STANDARD)
    if parsed is None:
        return code

    normalized = parsed.language.lower()

    if parsed.script:
        normalized += "-" + parsed.script[0].upper() + parsed.script[1:].lower()

    if parsed.region:
        normalized += "-" + parsed.region.upper()

    return normalized


def to_file_token(language_code: str, grammar: LanguageCodeGrammar) -> str:
    """
    Get the folder/file name token for a target language.

    ARB files use underscores, so every hyphen is replaced; standard files
    keep the code exactly as given.

    Examples:
        >>> to_file_token('zh-Hans-CN', ARB)
        'zh_Hans_CN'
        >>> to_file_token('pt-BR', STANDARD)
        'pt-BR'
    """
    return language_code.replace("-", grammar.separator)
