"""Tests for naming module."""

from pathlib import Path

import pytest

from legacy_mod_converter.core.errors import UsageError
from legacy_mod_converter.naming import (
    MOD_SUFFIX,
    base_name_for,
    derive_mod_name,
    sanitize_name,
    strip_known_suffixes,
)


class TestStripKnownSuffixes:
    """Test suffix stripping."""

    def test_strips_archive_extensions(self) -> None:
        assert strip_known_suffixes("Skin.zip") == "Skin"
        assert strip_known_suffixes("Skin.pak") == "Skin"
        assert strip_known_suffixes("Skin.utoc") == "Skin"

    def test_strips_mod_suffix_after_extension(self) -> None:
        assert strip_known_suffixes("Skin_9999999_P.pak") == "Skin"
        assert strip_known_suffixes("Skin_9999999.zip") == "Skin"
        assert strip_known_suffixes("Skin_P") == "Skin"

    def test_extensions_are_case_sensitive(self) -> None:
        assert strip_known_suffixes("Skin.ZIP") == "Skin.ZIP"


class TestSanitizeName:
    """Test character sanitization."""

    def test_replaces_disallowed_runs(self) -> None:
        assert sanitize_name("My Mod!!") == "My_Mod"

    def test_collapses_and_trims_underscores(self) -> None:
        assert sanitize_name("__a  b__") == "a_b"

    def test_keeps_dots_and_hyphens(self) -> None:
        assert sanitize_name("v1.2-final") == "v1.2-final"


class TestDeriveModName:
    """Test final name derivation."""

    def test_appends_suffix(self) -> None:
        assert derive_mod_name("OldSkin") == "OldSkin_9999999_P"

    def test_idempotent_on_suffixed_names(self) -> None:
        assert derive_mod_name("Foo_9999999_P") == derive_mod_name("Foo") == "Foo" + MOD_SUFFIX

    def test_strips_disallowed_characters_from_zip_name(self) -> None:
        assert derive_mod_name("My Mod!!.zip") == "My_Mod_9999999_P"

    def test_rejects_empty_result(self) -> None:
        with pytest.raises(UsageError, match="Pass --name explicitly"):
            derive_mod_name("!!!.zip")


def test_base_name_for_ignores_trailing_slash(tmp_path: Path) -> None:
    (tmp_path / "OldSkin").mkdir()
    assert base_name_for(Path(f"{tmp_path}/OldSkin/")) == "OldSkin"
