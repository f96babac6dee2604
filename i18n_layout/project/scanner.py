"""
Project scanner for detecting the languages already present in a project.

This module provides utilities to:
- List a directory without letting read errors escape
- Find the language folders or language files next to a source file
- Report the detected language codes, excluding the source language
"""

from pathlib import Path
from typing import Dict, List, Optional
from dataclasses import dataclass, field

from i18n_layout.project.structure import (
    PathLike,
    ProjectStructure,
    ProjectStructureType,
    detect_project_structure,
    extract_language_code_from_filename,
)
from i18n_layout.logger import get_logger

logger = get_logger(__name__)


@dataclass
class DirectoryListing:
    """Result of listing a directory; failed listings carry an error and no entries."""
    path: Path
    entries: List[Path] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class DetectedLanguage:
    """A language found in the project."""
    language_code: str
    path: Path  # language folder or language file


@dataclass
class ProjectScanResult:
    """Result of scanning the project around a source file."""
    source_file: Path
    structure: ProjectStructure
    detected: List[DetectedLanguage] = field(default_factory=list)

    @property
    def language_codes(self) -> List[str]:
        return [language.language_code for language in self.detected]


def list_directory(path: Path) -> DirectoryListing:
    """
    List the immediate entries of a directory.

    Read errors (permission denied, directory removed mid-scan) are logged
    and reported as an empty listing.
    """
    try:
        entries = sorted(path.iterdir())
    except OSError as e:
        logger.warning(f"Error scanning directory {path}: {e}")
        return DirectoryListing(path=path, error=str(e))

    return DirectoryListing(path=path, entries=entries)


def _sort_key(language_code: str):
    return language_code.casefold(), language_code


def _scan_language_folders(structure: ProjectStructure) -> Dict[str, Path]:
    listing = list_directory(structure.base_path)
    found = {}
    for entry in listing.entries:
        if entry.is_dir() and structure.grammar.matches(entry.name):
            found[entry.name] = entry
    return found


def _scan_language_files(structure: ProjectStructure, extension: str) -> Dict[str, Path]:
    listing = list_directory(structure.base_path)
    found = {}
    for entry in listing.entries:
        if not entry.name.endswith(extension) or not entry.is_file():
            continue
        file_name = entry.name[:len(entry.name) - len(extension)]
        language_code = extract_language_code_from_filename(file_name, structure.grammar)
        if language_code and language_code not in found:
            found[language_code] = entry
    return found


def scan_project(source_file_path: PathLike) -> ProjectScanResult:
    """
    Scan the project around a source file for existing languages.

    Folder-based projects are scanned for language folders under the base
    path, file-based projects for language files with the source extension.
    Unknown structures are not scanned at all.

    Args:
        source_file_path: Path to the source localization file

    Returns:
        ProjectScanResult with languages sorted case-insensitively, original
        casing preserved and the source language left out
    """
    source_file = Path(source_file_path)
    structure = detect_project_structure(source_file)

    if structure.kind == ProjectStructureType.FOLDER_BASED:
        found = _scan_language_folders(structure)
    elif structure.kind == ProjectStructureType.FILE_BASED:
        found = _scan_language_files(structure, source_file.suffix)
    else:
        logger.info(f"Unknown project structure, skipping language scan: {source_file}")
        found = {}

    if structure.source_language:
        found.pop(structure.source_language, None)

    detected = [
        DetectedLanguage(language_code=code, path=found[code])
        for code in sorted(found, key=_sort_key)
    ]

    logger.info(
        f"Scan complete: {structure.kind.value} structure, "
        f"source: {structure.source_language}, detected: {[d.language_code for d in detected]}"
    )
    return ProjectScanResult(source_file=source_file, structure=structure, detected=detected)


def detect_languages_from_project(source_file_path: PathLike) -> List[str]:
    """
    Get the language codes present in the project, excluding the source language.

    Never raises on unreadable directories; returns an empty list for
    projects whose structure is unknown.
    """
    return scan_project(source_file_path).language_codes
