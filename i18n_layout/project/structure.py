"""
Project structure detection for localization files.

Given a single source file, decide how the surrounding project lays out its
languages:
- Folder-based: one directory per language (locales/en/common.json)
- File-based: one file per language (i18n/en.json, lib/l10n/app_en_US.arb)
- Unknown: no recognizable convention (translations/messages.json)

The structure is always recomputed from the filesystem; nothing is cached.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from i18n_layout.language_codes import (
    ARB,
    LanguageCodeGrammar,
    grammar_for_extension,
)
from i18n_layout.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


class ProjectStructureType(str, Enum):
    FOLDER_BASED = "folder"
    FILE_BASED = "file"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ProjectStructure:
    """Detected layout around a source file."""
    kind: ProjectStructureType
    base_path: Path  # directory holding the language folders or files
    grammar: LanguageCodeGrammar
    source_language: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "base_path": str(self.base_path),
            "format": self.grammar.name,
            "source_language": self.source_language,
        }


def extract_language_code_from_filename(file_name: str, grammar: LanguageCodeGrammar) -> Optional[str]:
    """
    Extract a language code from a file name without extension.

    Standard file names must be a language code in full. ARB file names may
    carry an application prefix joined by '_': right-aligned suffixes of the
    '_'-separated segments are tried from the longest to the shortest and the
    first match wins, so 'app_en_US' gives 'en_US' and 'my_app_fr' gives 'fr'.

    A prefix that itself looks like a language code is ambiguous
    ('fi_fi' gives 'fi'); the longest matching suffix is taken as-is.

    Args:
        file_name: File stem (e.g., 'en-US', 'app_en_US')
        grammar: Grammar selected from the file extension

    Returns:
        Language code or None if no code can be extracted
    """
    if grammar is not ARB:
        return file_name if grammar.matches(file_name) else None

    parts = file_name.split("_")
    for start in range(len(parts)):
        candidate = "_".join(parts[start:])
        if grammar.matches(candidate):
            return candidate

    return None


def detect_project_structure(
    source_file_path: PathLike,
    grammar: Optional[LanguageCodeGrammar] = None
) -> ProjectStructure:
    """
    Detect the project structure around a source localization file.

    Detection order:
    1. Parent directory is a language code -> folder-based, base path is the
       grandparent and the folder name (casing kept) is the source language
    2. File name contains a language code -> file-based, base path is the
       file's directory
    3. Otherwise -> unknown, base path is the file's directory

    Folder detection comes first because folder-based projects often use
    plain names such as common.json inside the language folders.

    Args:
        source_file_path: Path to the source file
        grammar: Language code grammar; selected from the extension when omitted

    Returns:
        ProjectStructure
    """
    source_file = Path(source_file_path)
    if grammar is None:
        grammar = grammar_for_extension(source_file.suffix)

    source_dir = source_file.parent
    parent_name = source_dir.name

    if grammar.matches(parent_name):
        structure = ProjectStructure(
            kind=ProjectStructureType.FOLDER_BASED,
            base_path=source_dir.parent,
            grammar=grammar,
            source_language=parent_name,
        )
        logger.debug(f"Folder-based structure detected for {source_file}: {parent_name}")
        return structure

    language_code = extract_language_code_from_filename(source_file.stem, grammar)
    if language_code:
        logger.debug(f"File-based structure detected for {source_file}: {language_code}")
        return ProjectStructure(
            kind=ProjectStructureType.FILE_BASED,
            base_path=source_dir,
            grammar=grammar,
            source_language=language_code,
        )

    logger.debug(f"Unknown project structure for {source_file}")
    return ProjectStructure(
        kind=ProjectStructureType.UNKNOWN,
        base_path=source_dir,
        grammar=grammar,
    )
