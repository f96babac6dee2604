"""Tests for i18n_layout.project.structure."""

import pytest

from i18n_layout.language_codes import ARB, STANDARD
from i18n_layout.project.structure import (
    ProjectStructureType,
    detect_project_structure,
    extract_language_code_from_filename,
)


# ---------------------------------------------------------------------------
# detect_project_structure - JSON
# ---------------------------------------------------------------------------
class TestDetectProjectStructure:

    def test_folder_based(self, make_files):
        root = make_files("locales/en/common.json", "locales/fr/common.json")

        structure = detect_project_structure(root / "locales" / "en" / "common.json")

        assert structure.kind == ProjectStructureType.FOLDER_BASED
        assert structure.base_path == root / "locales"
        assert structure.source_language == "en"
        assert structure.grammar is STANDARD

    def test_folder_based_complex_code_keeps_casing(self, make_files):
        root = make_files("locales/zh-Hans-CN/app.json")

        structure = detect_project_structure(root / "locales" / "zh-Hans-CN" / "app.json")

        assert structure.kind == ProjectStructureType.FOLDER_BASED
        assert structure.source_language == "zh-Hans-CN"

    def test_folder_wins_over_language_file_name(self, make_files):
        root = make_files("locales/de/en.json")

        structure = detect_project_structure(root / "locales" / "de" / "en.json")

        assert structure.kind == ProjectStructureType.FOLDER_BASED
        assert structure.source_language == "de"

    def test_file_based(self, make_files):
        root = make_files("i18n/en.json")

        structure = detect_project_structure(root / "i18n" / "en.json")

        assert structure.kind == ProjectStructureType.FILE_BASED
        assert structure.base_path == root / "i18n"
        assert structure.source_language == "en"

    def test_unknown(self, make_files):
        root = make_files("translations/messages.json")

        structure = detect_project_structure(root / "translations" / "messages.json")

        assert structure.kind == ProjectStructureType.UNKNOWN
        assert structure.base_path == root / "translations"
        assert structure.source_language is None

    def test_underscored_json_name_is_file_based(self, make_files):
        # app_en reads as language "app" with region "en"
        root = make_files("i18n/app_en.json")

        structure = detect_project_structure(root / "i18n" / "app_en.json")

        assert structure.kind == ProjectStructureType.FILE_BASED
        assert structure.source_language == "app_en"

    def test_non_ascii_folder_is_not_a_language(self, make_files):
        root = make_files("locales/\u017ft/messages.json")

        structure = detect_project_structure(root / "locales" / "\u017ft" / "messages.json")

        assert structure.kind == ProjectStructureType.UNKNOWN

    def test_accepts_string_paths(self, make_files):
        root = make_files("i18n/pt-BR.json")

        structure = detect_project_structure(str(root / "i18n" / "pt-BR.json"))

        assert structure.kind == ProjectStructureType.FILE_BASED
        assert structure.source_language == "pt-BR"

    def test_does_not_need_the_file_to_exist(self, tmp_path):
        structure = detect_project_structure(tmp_path / "i18n" / "fr.json")

        assert structure.kind == ProjectStructureType.FILE_BASED
        assert structure.source_language == "fr"

    def test_to_dict(self, make_files):
        root = make_files("i18n/en.json")

        data = detect_project_structure(root / "i18n" / "en.json").to_dict()

        assert data == {
            "kind": "file",
            "base_path": str(root / "i18n"),
            "format": "standard",
            "source_language": "en",
        }


# ---------------------------------------------------------------------------
# detect_project_structure - ARB
# ---------------------------------------------------------------------------
class TestDetectArbStructure:

    @pytest.mark.parametrize(
        "file_name, expected",
        [
            ("app_en_US.arb", "en_US"),
            ("my_app_fr.arb", "fr"),
            ("app_zh_Hans_CN.arb", "zh_Hans_CN"),
            ("en_US.arb", "en_US"),
        ],
    )
    def test_file_based_with_prefix(self, make_files, file_name, expected):
        root = make_files(f"lib/l10n/{file_name}")

        structure = detect_project_structure(root / "lib" / "l10n" / file_name)

        assert structure.kind == ProjectStructureType.FILE_BASED
        assert structure.source_language == expected
        assert structure.grammar is ARB

    def test_folder_based(self, make_files):
        root = make_files("lib/l10n/en_US/app.arb")

        structure = detect_project_structure(root / "lib" / "l10n" / "en_US" / "app.arb")

        assert structure.kind == ProjectStructureType.FOLDER_BASED
        assert structure.base_path == root / "lib" / "l10n"
        assert structure.source_language == "en_US"

    def test_hyphenated_folder_is_not_an_arb_language(self, make_files):
        root = make_files("lib/l10n/en-US/intl_messages.arb")

        structure = detect_project_structure(root / "lib" / "l10n" / "en-US" / "intl_messages.arb")

        assert structure.kind == ProjectStructureType.UNKNOWN

    def test_explicit_grammar_overrides_extension(self, make_files):
        root = make_files("i18n/en-US.json")

        structure = detect_project_structure(root / "i18n" / "en-US.json", grammar=ARB)

        assert structure.kind == ProjectStructureType.UNKNOWN


# ---------------------------------------------------------------------------
# extract_language_code_from_filename
# ---------------------------------------------------------------------------
class TestExtractLanguageCode:

    def test_standard_needs_whole_name(self):
        assert extract_language_code_from_filename("en-US", STANDARD) == "en-US"
        assert extract_language_code_from_filename("app.en", STANDARD) is None
        assert extract_language_code_from_filename("app_en_x", STANDARD) is None
        assert extract_language_code_from_filename("messages", STANDARD) is None

    def test_standard_underscore_name_is_a_code(self):
        # case-insensitive with "_" allowed: language "app", region "en"
        assert extract_language_code_from_filename("app_en", STANDARD) == "app_en"

    def test_arb_longest_suffix_wins(self):
        assert extract_language_code_from_filename("app_en_US", ARB) == "en_US"
        assert extract_language_code_from_filename("intl_zh_Hant_TW", ARB) == "zh_Hant_TW"

    def test_arb_prefix_that_looks_like_a_code(self):
        # 'fi_fi' cannot be a code (region is uppercase), so the last segment is used
        assert extract_language_code_from_filename("fi_fi", ARB) == "fi"
        # a lowercase three-letter name is itself a valid ARB code
        assert extract_language_code_from_filename("app", ARB) == "app"

    def test_arb_without_code(self):
        assert extract_language_code_from_filename("messages", ARB) is None
        assert extract_language_code_from_filename("", ARB) is None
