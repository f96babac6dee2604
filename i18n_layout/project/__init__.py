"""
Project module - Project structure inference and target path resolution

This module provides:
- structure: Folder/file-based layout detection and source language inference
- scanner: Detection of the languages already present in a project
- paths: Target file paths and collision-free renaming
"""

from i18n_layout.project.structure import (
    ProjectStructureType,
    ProjectStructure,
    detect_project_structure,
    extract_language_code_from_filename,
)

from i18n_layout.project.scanner import (
    DirectoryListing,
    DetectedLanguage,
    ProjectScanResult,
    list_directory,
    scan_project,
    detect_languages_from_project,
)

from i18n_layout.project.paths import (
    InvalidLanguageCodeError,
    TargetFile,
    generate_target_file_path,
    get_unique_file_path,
    resolve_output_path,
    get_filtered_strings_path,
    is_supported_source_file,
    plan_target_files,
)

from i18n_layout.language_codes import (
    normalize_language_code,
    validate_language_code,
)
