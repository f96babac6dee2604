"""
Target path resolution module.

This module computes where a translated file should be written:
- Target path generation for each project structure
- Collision-safe renaming when an existing file must not be overwritten
- Planning of several target languages at once
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from i18n_layout.language_codes import ARB, to_file_token, validate_language_code
from i18n_layout.project.structure import (
    PathLike,
    ProjectStructureType,
    detect_project_structure,
)
from i18n_layout.logger import get_logger

logger = get_logger(__name__)

FILTERED_SUFFIX = "filtered"


class InvalidLanguageCodeError(ValueError):
    """Target language code is not a valid language code."""

    def __init__(self, language_code: str):
        super().__init__(
            f"Invalid language code format: {language_code}. "
            f"Please use BCP-47 format (e.g., en-US, en_US)."
        )
        self.language_code = language_code


@dataclass
class TargetFile:
    """Planned output file for one target language."""
    language_code: str
    path: Path
    exists: bool


def generate_target_file_path(source_file_path: PathLike, target_language: str) -> Path:
    """
    Generate the path of the translated file for a target language.

    Naming per structure:
    - Folder-based: <base>/<language>/<source file name>; the language
      folder is created if missing
    - File-based ARB: <dir>/<prefix><language>.arb, where prefix is whatever
      preceded the source language in the source file name (app_en_US.arb ->
      app_es.arb)
    - File-based: <dir>/<language><ext>
    - Unknown: <dir>/<source stem>.<language><ext>

    ARB targets use underscores in place of hyphens (zh-Hans-CN -> zh_Hans_CN).
    The returned path is not checked for collisions; see get_unique_file_path.

    Args:
        source_file_path: Path to the source localization file
        target_language: Target language code, casing is kept as given

    Returns:
        Target file path
    """
    source_file = Path(source_file_path)
    structure = detect_project_structure(source_file)
    extension = source_file.suffix
    source_name = source_file.stem
    language_token = to_file_token(target_language, structure.grammar)

    if structure.kind == ProjectStructureType.FOLDER_BASED:
        target_dir = structure.base_path / language_token
        if not target_dir.exists():
            logger.info(f"Creating language folder: {target_dir}")
        target_dir.mkdir(parents=True, exist_ok=True)
        target_path = target_dir / f"{source_name}{extension}"

    elif structure.kind == ProjectStructureType.FILE_BASED:
        if structure.grammar is ARB:
            prefix = ""
            if structure.source_language:
                language_index = source_name.find(structure.source_language)
                if language_index > 0:
                    prefix = source_name[:language_index]
            target_path = structure.base_path / f"{prefix}{language_token}{extension}"
        else:
            target_path = structure.base_path / f"{language_token}{extension}"

    else:
        target_path = source_file.parent / f"{source_name}.{language_token}{extension}"

    logger.debug(f"Target path for {target_language}: {target_path}")
    return target_path


def get_unique_file_path(file_path: PathLike) -> Path:
    """
    Get a path that does not exist yet.

    Returns the path unchanged when it is free, otherwise appends ' (n)'
    before the extension with n counting up from 1 (fr.json -> fr (1).json).
    Existence is checked for every candidate; the result is not a reservation.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        return file_path

    counter = 1
    while True:
        candidate = file_path.with_name(f"{file_path.stem} ({counter}){file_path.suffix}")
        if not candidate.exists():
            logger.debug(f"{file_path.name} exists, using {candidate.name}")
            return candidate
        counter += 1


def resolve_output_path(target_path: PathLike, overwrite: bool) -> Path:
    """
    Get the path a translation is finally written to.

    Args:
        target_path: Path from generate_target_file_path
        overwrite: True when an existing file is updated in place

    Returns:
        target_path itself when overwriting, otherwise a collision-free path
    """
    if overwrite:
        return Path(target_path)
    return get_unique_file_path(target_path)


def get_filtered_strings_path(target_path: PathLike) -> Path:
    """
    Get the sidecar path for strings excluded from a translation.

    Example: locales/fr.json -> locales/fr.filtered.json
    """
    target_path = Path(target_path)
    return target_path.with_name(f"{target_path.stem}.{FILTERED_SUFFIX}{target_path.suffix}")


def is_supported_source_file(file_path: PathLike, extensions: Iterable[str]) -> bool:
    """Check if a file has one of the accepted localization extensions."""
    return Path(file_path).suffix in set(extensions)


def plan_target_files(source_file_path: PathLike, target_languages: Iterable[str]) -> List[TargetFile]:
    """
    Plan the target files for several languages.

    All codes are validated before any path is generated, so an invalid code
    leaves the filesystem untouched.

    Args:
        source_file_path: Path to the source localization file
        target_languages: Target language codes, in the order to translate

    Returns:
        List of TargetFile, one per target language, in input order

    Raises:
        InvalidLanguageCodeError: If any target language code is invalid
    """
    target_languages = list(target_languages)

    for language_code in target_languages:
        if not validate_language_code(language_code):
            logger.warning(f"Validation error: invalid language code {language_code!r}")
            raise InvalidLanguageCodeError(language_code)

    plans = []
    for language_code in target_languages:
        target_path = generate_target_file_path(source_file_path, language_code)
        plans.append(TargetFile(
            language_code=language_code,
            path=target_path,
            exists=target_path.exists()
        ))

    existing_count = sum(1 for plan in plans if plan.exists)
    logger.info(
        f"Planned {len(plans)} target file(s) for {Path(source_file_path).name}, "
        f"{existing_count} already exist"
    )
    return plans
