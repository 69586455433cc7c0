import unittest
from pathlib import Path

from path_filter import (
    build_path_filter,
    file_extension,
    is_excluded,
    is_ignored,
    is_included,
)


class TestFileExtension(unittest.TestCase):
    def test_lower_cases_extension(self):
        self.assertEqual(file_extension(Path("src/Main.RS")), "rs")

    def test_last_suffix_only(self):
        self.assertEqual(file_extension(Path("archive.tar.gz")), "gz")

    def test_no_extension(self):
        self.assertIsNone(file_extension(Path("Makefile")))
        self.assertIsNone(file_extension(Path(".gitignore")))


class TestIsIgnored(unittest.TestCase):
    def test_top_level_directory(self):
        self.assertTrue(is_ignored(Path("node_modules/pkg/index.js"), ["node_modules"]))

    def test_nested_ignored_name_is_not_matched(self):
        self.assertFalse(is_ignored(Path("src/build/out.js"), ["build"]))

    def test_multi_component_name(self):
        self.assertTrue(is_ignored(Path("src/gen/api.py"), ["src/gen"]))
        self.assertFalse(is_ignored(Path("src/general.py"), ["src/gen"]))

    def test_prefix_of_component_does_not_match(self):
        self.assertFalse(is_ignored(Path("targets/a.rs"), ["target"]))

    def test_empty_and_dot_entries_never_match(self):
        self.assertFalse(is_ignored(Path("src/a.py"), ["", "."]))

    def test_relative_comparison_ignores_mount_point(self):
        # The ignored name appears in the absolute root but not in the relative path.
        self.assertFalse(is_ignored(Path("src/a.py"), ["home"]))


class TestIsExcluded(unittest.TestCase):
    def test_empty_list_never_excludes(self):
        self.assertFalse(is_excluded(Path("a.lock"), []))

    def test_matching_extension(self):
        self.assertTrue(is_excluded(Path("Cargo.LOCK"), ["lock"]))

    def test_no_extension_never_excluded(self):
        self.assertFalse(is_excluded(Path("LICENSE"), ["lock"]))

    def test_exact_match_only(self):
        self.assertFalse(is_excluded(Path("a.lock"), ["loc"]))
        self.assertFalse(is_excluded(Path("a.lock"), [".lock"]))


class TestIsIncluded(unittest.TestCase):
    def test_empty_list_includes_everything(self):
        self.assertTrue(is_included(Path("LICENSE"), []))
        self.assertTrue(is_included(Path("a.bin"), []))

    def test_matching_extension(self):
        self.assertTrue(is_included(Path("src/App.TSX"), ["tsx"]))

    def test_no_extension_with_allowlist(self):
        self.assertFalse(is_included(Path("Makefile"), ["py"]))

    def test_no_glob_matching(self):
        self.assertFalse(is_included(Path("a.py"), ["p*"]))


class TestBuildPathFilter(unittest.TestCase):
    def setUp(self):
        self.accepts = build_path_filter(
            ignored_dirs=[".git", "dist"],
            included_extensions=["py", "md"],
            excluded_extensions=["md"],
        )

    def test_accepts_included_file(self):
        self.assertTrue(self.accepts(Path("src/app.py")))

    def test_rejects_ignored_directory(self):
        self.assertFalse(self.accepts(Path("dist/app.py")))

    def test_exclude_wins_over_include(self):
        self.assertFalse(self.accepts(Path("README.md")))

    def test_rejects_not_included(self):
        self.assertFalse(self.accepts(Path("src/app.js")))

    def test_filter_lists_are_case_folded(self):
        accepts = build_path_filter([], ["PY"], [])
        self.assertTrue(accepts(Path("a.py")))


if __name__ == "__main__":
    unittest.main()
