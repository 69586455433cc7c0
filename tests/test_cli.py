import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from main import APP
from tree_helpers import build_tree

RUNNER = CliRunner()


class TestCollectCommand(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name).resolve()
        self.dest = self.root / "bundle"
        build_tree(self.root, {
            "Cargo.toml": "[package]\n",
            "src/main.rs": "fn main() {}\n",
            "target/debug/app.d": "deps\n",
            "notes.txt": "todo\n",
        })

    def tearDown(self):
        self.tmp.cleanup()

    def invoke(self, *args: str):
        return RUNNER.invoke(APP, ["collect", "-s", str(self.root), "-d", str(self.dest), *args])

    def test_collects_into_flat_directory(self):
        result = self.invoke()
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            sorted(p.name for p in self.dest.iterdir()),
            ["Cargo.toml", "notes.txt", "src_main.rs", "summary.md"],
        )

    def test_preset_with_override(self):
        result = self.invoke("--preset", "rust", "--no-summary")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(sorted(p.name for p in self.dest.iterdir()), ["Cargo.toml", "src_main.rs"])

    def test_include_and_exclude(self):
        result = self.invoke("--include", "rs,txt", "--exclude", "txt", "--no-summary")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual([p.name for p in self.dest.iterdir()], ["src_main.rs"])

    def test_unknown_preset_exits_non_zero(self):
        result = self.invoke("--preset", "cobol")
        self.assertEqual(result.exit_code, 1)
        self.assertFalse(self.dest.exists())

    def test_bad_config_file_exits_non_zero(self):
        config_path = self.root / "bad.toml"
        config_path.write_text("not = [valid", encoding="utf-8")
        result = self.invoke("--config", str(config_path))
        self.assertEqual(result.exit_code, 1)

    def test_unwritable_destination_exits_non_zero(self):
        (self.root / "blocker").write_text("file", encoding="utf-8")
        result = RUNNER.invoke(APP, [
            "collect", "-s", str(self.root), "-d", str(self.root / "blocker" / "out"),
        ])
        self.assertEqual(result.exit_code, 1)


class TestPresetsCommand(unittest.TestCase):
    def test_lists_presets(self):
        result = RUNNER.invoke(APP, ["presets"])
        self.assertEqual(result.exit_code, 0, result.output)
        for name in ("nextjs", "python", "rust"):
            self.assertIn(name, result.output)


if __name__ == "__main__":
    unittest.main()
