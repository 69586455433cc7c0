from types import MappingProxyType
from typing import Any

from schemas import PresetConfig

PRESETS = MappingProxyType({
    "nextjs": PresetConfig(
        ignored_dirs=("node_modules", ".next", "out", ".git"),
        included_extensions=("js", "jsx", "ts", "tsx", "json", "md", "css"),
        target_dirs=(".", "src", "components", "styles", "public"),
    ),
    "rust": PresetConfig(
        ignored_dirs=("target", ".git", ".idea", ".vscode"),
        included_extensions=("rs", "toml", "md", "json", "yml", "yaml"),
        target_dirs=(".", "src", "tests", "examples", "benches"),
    ),
    "python": PresetConfig(
        ignored_dirs=(".venv", "venv", "__pycache__", ".pytest_cache", ".mypy_cache", ".git"),
        included_extensions=("py", "pyi", "toml", "cfg", "ini", "md", "txt", "yml", "yaml"),
        target_dirs=(".",),
    ),
})


def get_preset(name: str) -> tuple[PresetConfig | None, str | None]:
    preset = PRESETS.get(name)
    if preset is None:
        available = ", ".join(sorted(PRESETS))
        return None, f"Preset '{name}' not found. Available presets: {available}"
    return preset, None


def preset_options(preset: PresetConfig) -> dict[str, Any]:
    """Map a preset onto the collect option fields it pre-populates."""
    return {
        "additional_ignored_dirs": preset.ignored_dirs,
        "included_extensions": preset.included_extensions,
        "excluded_extensions": preset.excluded_extensions,
        "target_dirs": preset.target_dirs,
    }
