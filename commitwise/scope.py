"""File scope inference for commitwise.

Derives a short topical label for a changed file from its path, used in
the prompt and the change summary. One table-driven function covers every
rule:

1. Known source roots (src/, lib/, packages/): the directory below the root
2. Test files: "tests"
3. Extension categories: styles, docs, config
4. Any other file inside a directory: the first path segment
5. Everything else: "core"
"""

DEFAULT_SCOPE = "core"

SOURCE_ROOTS = {"src", "lib", "packages"}

SOURCE_EXTENSIONS = {
    "py", "pyi", "js", "jsx", "ts", "tsx", "mjs", "cjs", "go", "rs",
    "java", "kt", "rb", "php", "c", "h", "cpp", "hpp", "cs", "swift", "sh",
}

EXTENSION_SCOPES = {
    "css": "styles",
    "scss": "styles",
    "sass": "styles",
    "less": "styles",
    "md": "docs",
    "mdx": "docs",
    "rst": "docs",
    "txt": "docs",
    "html": "docs",
    "json": "config",
    "yaml": "config",
    "yml": "config",
    "toml": "config",
    "ini": "config",
    "cfg": "config",
}

TEST_MARKERS = ("test", "spec")


def normalize_path(path: str) -> str:
    """Normalize a file path to forward slashes without outer slashes."""
    return path.replace("\\", "/").strip("/")


def get_extension(path: str) -> str:
    """Get the lowercase extension of a path without the dot."""
    name = normalize_path(path).split("/")[-1]
    if "." not in name.lstrip("."):
        return ""
    return name.rsplit(".", 1)[1].lower()


def is_test_path(path: str) -> bool:
    """Check whether a source file path looks like a test."""
    lowered = normalize_path(path).lower()
    return any(marker in lowered for marker in TEST_MARKERS)


def infer_file_scope(path: str) -> str:
    """Infer the scope label of one file.

    Args:
        path: File path relative to the repository root.

    Returns:
        The scope label, never empty.
    """
    parts = normalize_path(path).split("/")
    directories = parts[:-1]
    extension = get_extension(path)

    if len(directories) >= 2 and directories[0].lower() in SOURCE_ROOTS:
        return directories[1]

    if extension in SOURCE_EXTENSIONS and is_test_path(path):
        return "tests"

    if extension in EXTENSION_SCOPES:
        return EXTENSION_SCOPES[extension]

    if directories:
        return directories[0]

    return DEFAULT_SCOPE


def unique_scopes(paths: list[str]) -> list[str]:
    """Infer scopes for paths, deduplicated in first-seen order."""
    return list(dict.fromkeys(infer_file_scope(p) for p in paths))
