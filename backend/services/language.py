"""
Language Classifier - Map file paths to code fence language tags
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_LANGUAGE = "text"

DEFAULT_LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        "js": "javascript",
        "mjs": "javascript",
        "cjs": "javascript",
        "jsx": "jsx",
        "ts": "typescript",
        "tsx": "tsx",
        "py": "python",
        "pyi": "python",
        "rb": "ruby",
        "java": "java",
        "c": "c",
        "h": "c",
        "cpp": "cpp",
        "cc": "cpp",
        "cxx": "cpp",
        "hpp": "cpp",
        "cs": "csharp",
        "php": "php",
        "go": "go",
        "rs": "rust",
        "swift": "swift",
        "kt": "kotlin",
        "scala": "scala",
        "sh": "bash",
        "bash": "bash",
        "zsh": "bash",
        "fish": "fish",
        "ps1": "powershell",
        "r": "r",
        "sql": "sql",
        "html": "html",
        "htm": "html",
        "xml": "xml",
        "css": "css",
        "scss": "scss",
        "sass": "sass",
        "less": "less",
        "json": "json",
        "yaml": "yaml",
        "yml": "yaml",
        "toml": "toml",
        "ini": "ini",
        "md": "markdown",
        "txt": "text",
        "bicep": "bicep",
        "lua": "lua",
        "dart": "dart",
        "vue": "vue",
    }
)


def _normalize_extension(ext: str) -> str:
    return ext.lstrip(".").lower()


def extension_of(path: str) -> str:
    """Lowercase extension after the last dot of the base name, or ''"""
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return _normalize_extension(name.rsplit(".", 1)[1])


def language_for_path(path: str, table: Mapping[str, str] = DEFAULT_LANGUAGES) -> str:
    """Return the highlighting tag for *path*; never empty"""
    return table.get(extension_of(path)) or DEFAULT_LANGUAGE


class LanguageClassifier:
    """Extension lookup with caller-supplied overrides on top of the defaults"""

    def __init__(self, overrides: Mapping[str, str] | None = None):
        table = dict(DEFAULT_LANGUAGES)
        for ext, language in (overrides or {}).items():
            if language:
                table[_normalize_extension(ext)] = language
        self.table: Mapping[str, str] = MappingProxyType(table)

    def classify(self, path: str) -> str:
        return language_for_path(path, self.table)

    __call__ = classify
