"""
Tests for the fallback installer search.
"""

from installer_cli.system.locator import (
    list_files,
    locate,
    match_installer,
    search_pattern_for,
)


class TestSearchPattern:
    def test_known_products(self):
        assert search_pattern_for("EzDent-i") == "EzDent"
        assert search_pattern_for("Ez3D-i") == "Ez3D"
        assert search_pattern_for("EzServer") == "EzServer"

    def test_known_product_case_insensitive(self):
        assert search_pattern_for("my ezdent copy") == "EzDent"

    def test_unknown_hint_is_verbatim(self):
        assert search_pattern_for("Viewer") == "Viewer"


class TestMatchInstaller:
    def test_case_insensitive_match(self):
        names = ["readme.txt", "ezdent_setup_v2.EXE"]
        assert match_installer("EzDent-i", names) == "ezdent_setup_v2.EXE"

    def test_no_match(self):
        assert match_installer("EzServer", ["EzDent.exe", "notes.txt"]) is None

    def test_first_match_in_given_order(self):
        names = ["b_ez3d.exe", "a_ez3d.exe"]
        assert match_installer("Ez3D-i", names) == "b_ez3d.exe"

    def test_empty_listing(self):
        assert match_installer("EzDent-i", []) is None


class TestLocate:
    def test_finds_matching_file(self, tmp_path):
        (tmp_path / "ezdent_setup_v2.EXE").write_bytes(b"x")
        (tmp_path / "other.exe").write_bytes(b"x")
        assert locate("EzDent-i", tmp_path) == tmp_path.resolve() / "ezdent_setup_v2.EXE"

    def test_ignores_directories_and_subdirectories(self, tmp_path):
        (tmp_path / "EzServer_files").mkdir()
        (tmp_path / "EzServer_files" / "EzServer_Setup.exe").write_bytes(b"x")
        assert locate("EzServer", tmp_path) is None

    def test_not_found(self, tmp_path):
        assert locate("Ez3D-i", tmp_path) is None

    def test_multiple_matches_returns_one_of_them(self, tmp_path):
        for name in ("Ez3D_old.exe", "ez3d_new.exe"):
            (tmp_path / name).write_bytes(b"x")
        found = locate("Ez3D-i", tmp_path)
        assert found is not None
        assert found.name in {"Ez3D_old.exe", "ez3d_new.exe"}
        assert locate("Ez3D-i", tmp_path) == found

    def test_listing_is_sorted(self, tmp_path):
        for name in ("b.exe", "A.exe", "c.exe"):
            (tmp_path / name).write_bytes(b"x")
        assert list_files(tmp_path) == ["A.exe", "b.exe", "c.exe"]
