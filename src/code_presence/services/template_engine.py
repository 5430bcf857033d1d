"""Template substitution for user-configurable presence text.

Templates are split into literal text and :class:`ReplacementToken` segments
by a single regex over the closed token set, so ``{lang}`` can never match
inside ``{language}`` and a substituted value is never scanned again.

Values are resolved lazily through :class:`TemplateContext`: only tokens
that actually occur in a template are computed, and each at most once per
context.  This matters for ``{file_size}``, which may need a disk stat.
"""

from __future__ import annotations

import asyncio
import logging
import re
import string
from typing import Callable, Union

from code_presence.domain.entities import (
    DocumentSnapshot,
    EditorSnapshot,
    ReplacementToken,
    SourceControlSnapshot,
)
from code_presence.domain.ports.file_size_probe import FileSizeProbe
from code_presence.services.byte_size import format_bytes
from code_presence.services.source_control import (
    SourceControlInfo,
    resolve_source_control,
)

logger = logging.getLogger(__name__)

# Some presence clients collapse text fields shorter than two characters
ZERO_WIDTH_SPACE = "\u200b"

_TOKEN_RE = re.compile("|".join(re.escape(token.value) for token in ReplacementToken))
_TOKENS_BY_MARKER: dict[str, ReplacementToken] = {token.value: token for token in ReplacementToken}

Segment = Union[str, ReplacementToken]


# ── Tokenizer ───────────────────────────────────────────────────────────────


def tokenize(template: str) -> list[Segment]:
    """Split *template* into literal strings and tokens, in order."""
    segments: list[Segment] = []
    position = 0
    for match in _TOKEN_RE.finditer(template):
        if match.start() > position:
            segments.append(template[position : match.start()])
        segments.append(_TOKENS_BY_MARKER[match.group()])
        position = match.end()
    if position < len(template):
        segments.append(template[position:])
    return segments


def referenced_tokens(template: str) -> frozenset[ReplacementToken]:
    """Return the set of tokens that occur in *template*."""
    return frozenset(
        segment for segment in tokenize(template) if isinstance(segment, ReplacementToken)
    )


# ── Resolver ────────────────────────────────────────────────────────────────


class TemplateContext:
    """Per-refresh value source for template tokens.

    Parameters
    ----------
    editor:
        Editor snapshot; document and cursor tokens read from it.
    source_control:
        Snapshot used for ``{git_branch}`` and ``{git_repo_name}``.
    language:
        Display name behind the three language tokens, usually the file
        icon key.  ``None`` leaves those tokens unresolved.
    file_size_probe:
        Optional on-disk size lookup; without it the in-memory document
        length is used.
    file_size_timeout:
        Seconds to wait for the probe before falling back.
    """

    def __init__(
        self,
        editor: EditorSnapshot,
        source_control: SourceControlSnapshot,
        *,
        language: str | None = None,
        file_size_probe: FileSizeProbe | None = None,
        file_size_timeout: float = 2.0,
    ) -> None:
        self._editor = editor
        self._source_control = source_control
        self._language = language
        self._probe = file_size_probe
        self._timeout = file_size_timeout
        self._values: dict[ReplacementToken, str | None] = {}
        self._scm_info: SourceControlInfo | None = None

    async def resolve(self, token: ReplacementToken) -> str | None:
        """Return the value for *token*, or ``None`` if it is unavailable."""
        if token not in self._values:
            if token is ReplacementToken.FILE_SIZE:
                self._values[token] = await self._file_size()
            else:
                self._values[token] = _SYNC_RESOLVERS[token](self)
        return self._values[token]

    # ── Document & cursor ───────────────────────────────────────────────

    def _total_lines(self) -> str | None:
        document = self._editor.document
        return f"{document.line_count:,}" if document else None

    def _current_line(self) -> str | None:
        cursor = self._editor.cursor
        return f"{cursor.line + 1:,}" if cursor else None

    def _current_column(self) -> str | None:
        cursor = self._editor.cursor
        return f"{cursor.column + 1:,}" if cursor else None

    async def _file_size(self) -> str | None:
        document = self._editor.document
        if document is None:
            return None
        if document.size_bytes is not None:
            return format_bytes(document.size_bytes)
        return format_bytes(await self._query_file_size(document))

    async def _query_file_size(self, document: DocumentSnapshot) -> int:
        if self._probe is None:
            return document.text_length
        try:
            return await asyncio.wait_for(
                self._probe.size_of(document.path), timeout=self._timeout
            )
        except Exception as exc:
            logger.debug(
                "Size of %s unavailable (%s), using in-memory length",
                document.path,
                str(exc) or type(exc).__name__,
            )
            return document.text_length

    # ── Source control ──────────────────────────────────────────────────

    def _scm(self) -> SourceControlInfo:
        if self._scm_info is None:
            self._scm_info = resolve_source_control(self._source_control)
        return self._scm_info

    def _git_branch(self) -> str:
        return self._scm().branch

    def _git_repo_name(self) -> str:
        return self._scm().repository_name

    # ── Language & host ─────────────────────────────────────────────────

    def _language_lower(self) -> str | None:
        return self._language.lower() if self._language else None

    def _language_title(self) -> str | None:
        return string.capwords(self._language) if self._language else None

    def _language_upper(self) -> str | None:
        return self._language.upper() if self._language else None

    def _app_name(self) -> str:
        return self._editor.app_name


_SYNC_RESOLVERS: dict[ReplacementToken, Callable[[TemplateContext], str | None]] = {
    ReplacementToken.TOTAL_LINES: TemplateContext._total_lines,
    ReplacementToken.CURRENT_LINE: TemplateContext._current_line,
    ReplacementToken.CURRENT_COLUMN: TemplateContext._current_column,
    ReplacementToken.GIT_BRANCH: TemplateContext._git_branch,
    ReplacementToken.GIT_REPO_NAME: TemplateContext._git_repo_name,
    ReplacementToken.LANGUAGE_LOWER: TemplateContext._language_lower,
    ReplacementToken.LANGUAGE_TITLE: TemplateContext._language_title,
    ReplacementToken.LANGUAGE_UPPER: TemplateContext._language_upper,
    ReplacementToken.APP_NAME: TemplateContext._app_name,
}


# ── Rendering ───────────────────────────────────────────────────────────────


async def render(template: str, context: TemplateContext, *, min_width: int = 0) -> str:
    """Substitute every recognised token in *template*.

    Tokens whose value is unavailable are left verbatim.  The result is
    right-padded with zero-width spaces up to *min_width* characters.
    """
    parts: list[str] = []
    for segment in tokenize(template):
        if isinstance(segment, ReplacementToken):
            value = await context.resolve(segment)
            parts.append(segment.value if value is None else value)
        else:
            parts.append(segment)
    return "".join(parts).ljust(min_width, ZERO_WIDTH_SPACE)
