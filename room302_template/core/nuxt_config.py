"""Structured editing of ``nuxt.config.ts``.

The config is TypeScript, so it is not parsed in full. Instead the
``modules: [...]`` and ``css: [...]`` arrays are located with a scanner that
understands string literals, comments and nested brackets, split into their
top-level entries (each with its own comments), edited by name and spliced
back. Text outside the edited array is left byte-for-byte untouched, which
keeps every edit idempotent. Top-level properties of the config object can be
removed the same way.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

_QUOTES = "'\"`"
_OPENERS = {"[": "]", "{": "}", "(": ")"}
_CLOSERS = {"]", "}", ")"}
_OPENING_DECLARATIONS = (
    re.compile(r"defineNuxtConfig\s*\(\s*\{"),
    re.compile(r"export\s+default\s*\{"),
)


class NuxtConfigError(Exception):
    """Raised when nuxt.config.ts cannot be scanned."""


def _is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


def _skip_string(text: str, i: int) -> int:
    """Return the index just past the string literal starting at ``i``."""
    quote = text[i]
    j = i + 1
    while j < len(text):
        if text[j] == "\\":
            j += 2
            continue
        if text[j] == quote:
            return j + 1
        j += 1
    raise NuxtConfigError(f"Unterminated string literal at offset {i}")


def _skip_comment(text: str, i: int) -> int | None:
    """Return the index just past a comment starting at ``i``, if any."""
    if text.startswith("//", i):
        end = text.find("\n", i)
        return len(text) if end == -1 else end
    if text.startswith("/*", i):
        end = text.find("*/", i + 2)
        if end == -1:
            raise NuxtConfigError(f"Unterminated block comment at offset {i}")
        return end + 2
    return None


def _scan(text: str, start: int = 0) -> Iterator[tuple[int, str]]:
    """Yield (index, char) for code characters, skipping strings and comments.

    String literals are reported once, at their opening quote.
    """
    i = start
    while i < len(text):
        ch = text[i]
        if ch in _QUOTES:
            yield i, ch
            i = _skip_string(text, i)
            continue
        comment_end = _skip_comment(text, i)
        if comment_end is not None:
            i = comment_end
            continue
        yield i, ch
        i += 1


def _match_bracket(text: str, open_idx: int) -> int:
    """Return the index of the bracket closing the one at ``open_idx``."""
    stack: list[str] = []
    for i, ch in _scan(text, open_idx):
        if ch in _OPENERS:
            stack.append(_OPENERS[ch])
        elif ch in _CLOSERS:
            if not stack or stack.pop() != ch:
                raise NuxtConfigError(f"Unbalanced '{ch}' at offset {i}")
            if not stack:
                return i
    raise NuxtConfigError(f"Unclosed '{text[open_idx]}' at offset {open_idx}")


def _find_array(text: str, key: str) -> tuple[int, int] | None:
    """Locate ``key: [ ... ]`` and return the offsets of its brackets."""
    pattern = re.compile(r"\s*:\s*\[")
    for i, _ch in _scan(text):
        if not text.startswith(key, i):
            continue
        if i > 0 and _is_ident_char(text[i - 1]):
            continue
        match = pattern.match(text, i + len(key))
        if match is None:
            continue
        open_idx = match.end() - 1
        return open_idx, _match_bracket(text, open_idx)
    return None


def _top_level_tokens(body: str) -> Iterator[tuple[str, int, int]]:
    """Yield ("code" | "comma" | "comment", start, end) for an array body.

    Nested brackets and string literals are yielded as single code tokens.
    """
    i = 0
    while i < len(body):
        ch = body[i]
        if ch.isspace():
            i += 1
            continue
        comment_end = _skip_comment(body, i)
        if comment_end is not None:
            yield "comment", i, comment_end
            i = comment_end
            continue
        if ch == ",":
            yield "comma", i, i + 1
            i += 1
            continue
        if ch in _QUOTES:
            end = _skip_string(body, i)
        elif ch in _OPENERS:
            end = _match_bracket(body, i) + 1
        elif ch in _CLOSERS:
            raise NuxtConfigError(f"Unbalanced '{ch}' in array")
        else:
            end = i + 1
        yield "code", i, end
        i = end


@dataclass
class _Entry:
    """One array element with the comments that belong to it.

    ``leading`` holds comments on their own lines above the element;
    ``trailing`` is a comment on the element's last line, with the
    whitespace that separated it from the element or its comma.
    """

    code: str
    leading: list[str] = field(default_factory=list)
    trailing: str = ""


def _split_items(body: str) -> tuple[list[_Entry], bool, list[str]]:
    """Split an array body into top-level entries.

    Returns:
        (entries, has_trailing_comma, dangling_comments). Dangling comments
        follow the last entry on their own lines.
    """
    entries: list[_Entry] = []
    pending: list[str] = []
    start: int | None = None
    end = 0
    trailing_anchor: int | None = None
    owner: _Entry | None = None
    trailing_comma = False

    for kind, tok_start, tok_end in _top_level_tokens(body):
        if kind == "code":
            if start is None:
                start = tok_start
                owner = _Entry("", pending)
                pending = []
            elif owner is not None:
                # Comments followed by more code are part of the expression
                owner.trailing = ""
                pending = []
            end = tok_end
            trailing_anchor = tok_end
            trailing_comma = False
        elif kind == "comma":
            if owner is None or start is None:
                continue
            owner.code = body[start:end]
            entries.append(owner)
            start = None
            trailing_anchor = tok_end
            trailing_comma = True
        else:
            text = body[tok_start:tok_end]
            target = owner if start is not None else (entries[-1] if entries else None)
            same_line = trailing_anchor is not None and "\n" not in body[trailing_anchor:tok_start]
            if target is not None and same_line and not target.trailing:
                target.trailing = body[trailing_anchor:tok_start] + text
                trailing_anchor = None
            else:
                pending.append(text)
                trailing_anchor = None
            if start is None:
                owner = None

    if start is not None and owner is not None:
        owner.code = body[start:end]
        entries.append(owner)
        trailing_comma = False

    return entries, trailing_comma and bool(entries), pending


def entry_name(entry: str) -> str | None:
    """Name of an array entry: its first string literal.

    Covers both ``'@nuxt/ui'`` and ``['@nuxt/ui', { ... }]``.
    """
    for i, ch in _scan(entry):
        if ch in _QUOTES:
            return entry[i + 1:_skip_string(entry, i) - 1]
    return None


def _line_indent(text: str, idx: int) -> str:
    """Whitespace at the start of the line containing ``idx``."""
    line_start = text.rfind("\n", 0, idx) + 1
    line = text[line_start:]
    return line[:len(line) - len(line.lstrip(" \t"))]


@dataclass
class _ArrayLiteral:
    open_idx: int
    close_idx: int
    entries: list[_Entry]
    trailing_comma: bool
    dangling: list[str]
    multiline: bool
    entry_indent: str
    closing_indent: str
    quote: str

    @classmethod
    def locate(cls, text: str, key: str) -> _ArrayLiteral | None:
        span = _find_array(text, key)
        if span is None:
            return None
        open_idx, close_idx = span
        body = text[open_idx + 1:close_idx]
        entries, trailing, dangling = _split_items(body)
        multiline = "\n" in body

        closing_indent = _line_indent(text, close_idx)
        if text[text.rfind("\n", 0, close_idx) + 1:close_idx].strip():
            # ']' shares a line with an entry
            closing_indent = _line_indent(text, open_idx)
        first = body.lstrip()
        entry_indent = (
            _line_indent(text, open_idx + 1 + len(body) - len(first))
            if multiline and first
            else closing_indent + "  "
        )

        quote = "'"
        for entry in entries:
            if entry.code[0] in "'\"":
                quote = entry.code[0]
                break

        return cls(
            open_idx,
            close_idx,
            entries,
            trailing,
            dangling,
            multiline,
            entry_indent,
            closing_indent,
            quote,
        )

    def render(self) -> str:
        if not self.entries and not self.dangling:
            return "[]"
        last = len(self.entries) - 1
        if not self.multiline:
            parts = [
                " ".join([*entry.leading, entry.code]) + ("," if i < last else "") + entry.trailing
                for i, entry in enumerate(self.entries)
            ]
            return "[" + " ".join(parts + self.dangling) + "]"

        lines: list[str] = []
        for i, entry in enumerate(self.entries):
            lines.extend(self.entry_indent + comment for comment in entry.leading)
            comma = "," if i < last or self.trailing_comma else ""
            lines.append(f"{self.entry_indent}{entry.code}{comma}{entry.trailing}")
        lines.extend(self.entry_indent + comment for comment in self.dangling)
        return "[\n" + "\n".join(lines) + f"\n{self.closing_indent}]"

    def splice(self, text: str) -> str:
        return text[:self.open_idx] + self.render() + text[self.close_idx + 1:]


class NuxtConfig:
    """Editable view of a nuxt.config.ts source text."""

    def __init__(self, text: str) -> None:
        self.text = text
        # Fail early on unbalanced input
        _ArrayLiteral.locate(text, "modules")
        _ArrayLiteral.locate(text, "css")

    @property
    def modules(self) -> list[str]:
        """Names of the registered modules, in order."""
        array = _ArrayLiteral.locate(self.text, "modules")
        if array is None:
            return []
        names = (entry_name(entry.code) for entry in array.entries)
        return [name for name in names if name is not None]

    def has_module(self, name: str) -> bool:
        return name in self.modules

    def remove_module(self, name: str) -> bool:
        """Drop every registration of ``name`` with its comments.

        Returns True if one was removed.
        """
        array = _ArrayLiteral.locate(self.text, "modules")
        if array is None:
            return False
        kept = [entry for entry in array.entries if entry_name(entry.code) != name]
        if len(kept) == len(array.entries):
            return False
        array.entries = kept
        self.text = array.splice(self.text)
        return True

    def remove_property(self, key: str) -> bool:
        """Drop ``key: <value>`` from the top-level config object.

        A property on lines of its own is removed with those lines.
        Returns True if it was found.
        """
        span = self._property_span(key)
        if span is None:
            return False
        start, end = span
        line_start = self.text.rfind("\n", 0, start) + 1
        line_end = self.text.find("\n", end)
        line_end = len(self.text) if line_end == -1 else line_end
        if not self.text[line_start:start].strip() and not self.text[end:line_end].strip():
            start, end = line_start, min(line_end + 1, len(self.text))
        else:
            while end < len(self.text) and self.text[end] in " \t":
                end += 1
        self.text = self.text[:start] + self.text[end:]
        return True

    def _property_span(self, key: str) -> tuple[int, int] | None:
        """Offsets of ``key: value`` plus its comma, at the config object's top level."""
        object_span = self._config_object()
        if object_span is None:
            return None
        open_idx, close_idx = object_span
        key_pattern = re.compile(re.escape(key) + r"\s*:")

        depth = 0
        for i, ch in _scan(self.text, open_idx + 1):
            if i >= close_idx:
                break
            if ch in _OPENERS:
                depth += 1
            elif ch in _CLOSERS:
                depth -= 1
            elif depth == 0 and not _is_ident_char(self.text[i - 1]):
                match = key_pattern.match(self.text, i)
                if match is not None:
                    return i, self._value_end(match.end(), close_idx)
        return None

    def _value_end(self, start: int, close_idx: int) -> int:
        """End of a property value: just past its comma, or its last character."""
        depth = 0
        for i, ch in _scan(self.text, start):
            if ch in _OPENERS:
                depth += 1
            elif ch in _CLOSERS:
                if depth == 0:
                    return len(self.text[:i].rstrip())
                depth -= 1
            elif ch == "," and depth == 0:
                return i + 1
        return close_idx

    def _config_object(self) -> tuple[int, int] | None:
        for pattern in _OPENING_DECLARATIONS:
            match = pattern.search(self.text)
            if match is not None:
                open_idx = match.end() - 1
                return open_idx, _match_bracket(self.text, open_idx)
        return None

    def references_stylesheet(self, path: str) -> bool:
        """True if the stylesheet is already mentioned anywhere in the config."""
        return path.removeprefix("~/") in self.text

    def add_stylesheet(self, path: str) -> None:
        """Include ``path`` in the ``css`` array, creating the array if needed."""
        if self.references_stylesheet(path):
            return

        array = _ArrayLiteral.locate(self.text, "css")
        if array is not None:
            array.entries.append(_Entry(f"{array.quote}{path}{array.quote}"))
            self.text = array.splice(self.text)
            return

        self.text = self._inject_after_opening(f"css: ['{path}'],")

    def _inject_after_opening(self, line: str) -> str:
        for pattern in _OPENING_DECLARATIONS:
            match = pattern.search(self.text)
            if match is None:
                continue
            insert_at = match.end()
            rest = self.text[insert_at:]
            next_line = rest.lstrip("\n").split("\n", 1)[0]
            indent = next_line[:len(next_line) - len(next_line.lstrip(" \t"))]
            if not rest.startswith("\n") or not indent:
                indent = "  "
            return f"{self.text[:insert_at]}\n{indent}{line}{rest}"
        raise NuxtConfigError("Could not find the config's opening declaration")

    def render(self) -> str:
        return self.text
