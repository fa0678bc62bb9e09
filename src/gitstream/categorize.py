"""Coarse categorization of changed file paths.

Rules are evaluated in a fixed priority order and the first match wins:

1. Test: a path segment starts with a test word or names tests or specs
   (``testing/``, ``TestFoo.java``, ``foo_test.go``, ``app.spec.ts``,
   ``__tests__/``, ``FooTest.java``)
2. Vendor / Build: dependency trees, lockfiles and build manifests
3. Documentation: ``md``, ``txt``, ``rst`` and friends
4. Source: known programming language extensions
5. Config: dotfiles and structured config formats
6. Asset: binary and media extensions
7. Unknown
"""

import re
from enum import Enum

__all__ = ["Category", "categorize", "path_extension"]


class Category(str, Enum):
    """Closed set of file categories."""

    SOURCE = "source"
    TEST = "test"
    CONFIG = "config"
    DOCUMENTATION = "documentation"
    BUILD = "build"
    VENDOR = "vendor"
    ASSET = "asset"
    UNKNOWN = "unknown"


_TEST_SEGMENT_RE = re.compile(
    r"(?:^|[/._-])(?:tests?|specs?|__tests__)(?:$|[/._-])",
    re.IGNORECASE,
)
# Segments that begin with a test word: testing/, testutils.py, TestFoo.java
_TEST_PREFIX_RE = re.compile(r"(?:^|/)(?:__)?test", re.IGNORECASE)
# CamelCase test classes such as FooTest.java or BarTests.swift
_TEST_CLASS_RE = re.compile(r"[a-z0-9]Tests?\.[^/]+$")

VENDOR_DIRS = frozenset({
    "vendor",
    "node_modules",
    "bower_components",
    "third_party",
    "third-party",
    "thirdparty",
    "pods",
    "site-packages",
})

BUILD_FILENAMES = frozenset({
    "cargo.toml",
    "cargo.lock",
    "package.json",
    "package-lock.json",
    "npm-shrinkwrap.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lockb",
    "pyproject.toml",
    "poetry.lock",
    "pipfile",
    "pipfile.lock",
    "setup.py",
    "setup.cfg",
    "uv.lock",
    "go.mod",
    "go.sum",
    "gemfile",
    "gemfile.lock",
    "composer.json",
    "composer.lock",
    "makefile",
    "gnumakefile",
    "cmakelists.txt",
    "meson.build",
    "build.gradle",
    "build.gradle.kts",
    "settings.gradle",
    "settings.gradle.kts",
    "pom.xml",
    "build.xml",
    "build.sbt",
    "dockerfile",
    "build",
    "build.bazel",
    "workspace",
    "mix.exs",
    "mix.lock",
    "rebar.config",
    "stack.yaml",
    "flake.nix",
    "flake.lock",
})

BUILD_EXTENSIONS = frozenset({"gradle", "cmake", "mk", "bzl", "cabal", "gemspec"})

_REQUIREMENTS_RE = re.compile(r"^requirements[\w.-]*\.(?:txt|in)$")

DOCUMENTATION_EXTENSIONS = frozenset({
    "md",
    "markdown",
    "txt",
    "rst",
    "adoc",
    "asciidoc",
    "textile",
    "rdoc",
    "pod",
})

# Extensionless files conventionally holding prose
DOCUMENTATION_FILENAMES = frozenset({
    "readme",
    "license",
    "licence",
    "copying",
    "changelog",
    "changes",
    "authors",
    "contributors",
    "notice",
    "contributing",
})

SOURCE_EXTENSIONS = frozenset({
    "py", "pyi", "pyx",
    "rs",
    "go",
    "c", "h", "cc", "cpp", "cxx", "hpp", "hh", "hxx",
    "m", "mm",
    "java", "kt", "kts", "scala", "groovy", "clj", "cljs",
    "js", "jsx", "mjs", "cjs", "ts", "tsx", "vue", "svelte",
    "rb", "php", "pl", "pm", "lua", "r", "jl",
    "cs", "fs", "vb",
    "swift", "dart",
    "ex", "exs", "erl", "hrl",
    "hs", "ml", "mli", "elm", "nim", "zig",
    "sh", "bash", "zsh", "fish", "ps1",
    "sql", "proto", "graphql",
    "html", "htm", "css", "scss", "sass", "less",
})

CONFIG_EXTENSIONS = frozenset({
    "yml",
    "yaml",
    "json",
    "toml",
    "ini",
    "cfg",
    "conf",
    "env",
    "properties",
    "xml",
    "plist",
    "editorconfig",
})

ASSET_EXTENSIONS = frozenset({
    "png", "jpg", "jpeg", "gif", "bmp", "tif", "tiff", "ico", "icns", "webp",
    "svg", "psd", "ai",
    "mp3", "wav", "ogg", "flac", "m4a",
    "mp4", "mov", "avi", "mkv", "webm",
    "ttf", "otf", "woff", "woff2", "eot",
    "pdf",
    "zip", "gz", "tgz", "bz2", "xz", "7z", "tar", "jar", "war",
    "bin", "exe", "dll", "so", "dylib", "a", "o", "class", "wasm",
})


def path_extension(path: str) -> str:
    """Return the text after the last dot of the final path segment.

    A leading dot alone does not start an extension, so ``.gitignore`` has
    none. Returns an empty string when there is no extension.

    Examples:
        >>> path_extension("src/main.rs")
        'rs'
        >>> path_extension("archive.tar.gz")
        'gz'
        >>> path_extension("dir.d/Makefile")
        ''
    """
    name = path.rsplit("/", 1)[-1]
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem.strip("."):
        return ""
    return ext


def _is_test(path: str) -> bool:
    return bool(
        _TEST_PREFIX_RE.search(path)
        or _TEST_SEGMENT_RE.search(path)
        or _TEST_CLASS_RE.search(path)
    )


def _is_vendor(segments: list[str]) -> bool:
    # The final segment is the file itself, only directories count
    return any(segment in VENDOR_DIRS for segment in segments[:-1])


def _is_build(name: str, extension: str) -> bool:
    return (
        name in BUILD_FILENAMES
        or extension in BUILD_EXTENSIONS
        or bool(_REQUIREMENTS_RE.match(name))
    )


def _is_config(segments: list[str], extension: str) -> bool:
    if extension in CONFIG_EXTENSIONS:
        return True
    return any(segment.startswith(".") for segment in segments)


def categorize(path: str, extension: str) -> Category:
    """Map a file path and its extension to a single category.

    Total and deterministic: every input yields exactly one category. Path
    and extension matching is case-insensitive.

    Args:
        path: Repository-relative file path using ``/`` separators
        extension: Extension as returned by :func:`path_extension`

    Returns:
        The first matching category in priority order
    """
    lowered = path.lower()
    ext = extension.lower()
    segments = lowered.split("/")
    name = segments[-1]

    if _is_test(path):
        return Category.TEST
    if _is_vendor(segments):
        return Category.VENDOR
    if _is_build(name, ext):
        return Category.BUILD
    if ext in DOCUMENTATION_EXTENSIONS or (
        not ext and name in DOCUMENTATION_FILENAMES
    ):
        return Category.DOCUMENTATION
    if ext in SOURCE_EXTENSIONS:
        return Category.SOURCE
    if _is_config(segments, ext):
        return Category.CONFIG
    if ext in ASSET_EXTENSIONS:
        return Category.ASSET
    return Category.UNKNOWN
