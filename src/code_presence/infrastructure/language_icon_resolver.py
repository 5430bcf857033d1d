"""Static icon table, implements the FileIconResolver port."""

from __future__ import annotations

from code_presence.domain.entities import DocumentSnapshot

DEFAULT_ICON = "text"

# Exact file names take precedence over extensions (case-insensitive)
FILENAME_ICONS: dict[str, str] = {
    "dockerfile": "docker",
    "docker-compose.yml": "docker",
    "docker-compose.yaml": "docker",
    "makefile": "makefile",
    "cmakelists.txt": "cmake",
    "package.json": "npm",
    "package-lock.json": "npm",
    "cargo.toml": "cargo",
    "cargo.lock": "cargo",
    "go.mod": "go",
    "gemfile": "ruby",
    "pyproject.toml": "python",
    "requirements.txt": "python",
    ".gitignore": "git",
    ".gitattributes": "git",
    "license": "license",
}

# Longest suffix wins, so ``.d.ts`` beats ``.ts``
EXTENSION_ICONS: dict[str, str] = {
    ".py": "python", ".pyi": "python", ".pyx": "python",
    ".js": "javascript", ".mjs": "javascript", ".cjs": "javascript",
    ".jsx": "react", ".tsx": "react",
    ".ts": "typescript", ".d.ts": "typescript",
    ".rs": "rust",
    ".go": "go",
    ".java": "java",
    ".kt": "kotlin", ".kts": "kotlin",
    ".c": "c", ".h": "c",
    ".cpp": "cpp", ".cc": "cpp", ".cxx": "cpp", ".hpp": "cpp",
    ".cs": "csharp",
    ".rb": "ruby",
    ".php": "php",
    ".swift": "swift",
    ".lua": "lua",
    ".sh": "shell", ".bash": "shell", ".zsh": "shell",
    ".ps1": "powershell",
    ".html": "html", ".htm": "html",
    ".css": "css", ".scss": "sass", ".sass": "sass",
    ".vue": "vue",
    ".svelte": "svelte",
    ".json": "json", ".jsonc": "json",
    ".yml": "yaml", ".yaml": "yaml",
    ".toml": "toml",
    ".xml": "xml",
    ".md": "markdown", ".markdown": "markdown",
    ".rst": "restructuredtext",
    ".sql": "sql",
    ".ipynb": "jupyter",
    ".txt": "text",
}

# Fallback on the editor's language id when the path says nothing
LANGUAGE_ID_ICONS: dict[str, str] = {
    "python": "python",
    "javascript": "javascript",
    "javascriptreact": "react",
    "typescript": "typescript",
    "typescriptreact": "react",
    "rust": "rust",
    "go": "go",
    "java": "java",
    "kotlin": "kotlin",
    "c": "c",
    "cpp": "cpp",
    "csharp": "csharp",
    "ruby": "ruby",
    "php": "php",
    "shellscript": "shell",
    "powershell": "powershell",
    "html": "html",
    "css": "css",
    "scss": "sass",
    "json": "json",
    "jsonc": "json",
    "yaml": "yaml",
    "toml": "toml",
    "markdown": "markdown",
    "dockerfile": "docker",
    "makefile": "makefile",
    "sql": "sql",
    "plaintext": "text",
}


def _filename(path: str) -> str:
    return path.replace("\\", "/").rsplit("/", maxsplit=1)[-1]


class LanguageIconResolver:
    """Concrete FileIconResolver backed by the tables above."""

    def resolve(self, document: DocumentSnapshot) -> str:
        name = _filename(document.path).lower()
        if name in FILENAME_ICONS:
            return FILENAME_ICONS[name]

        matches = [ext for ext in EXTENSION_ICONS if name.endswith(ext)]
        if matches:
            return EXTENSION_ICONS[max(matches, key=len)]

        return LANGUAGE_ID_ICONS.get(document.language_id.lower(), DEFAULT_ICON)
