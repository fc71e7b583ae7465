# Area: Shared
"""
kgp_client._shared.codec — Wire codec for KGP lines
===================================================

Converts between protocol lines and Message values.

Line format:  <id>[@<ref>] <verb> <arg>*

Arguments are integers, bare words, or double-quoted strings. Inside a
string, backslash, double quote, line feed, carriage return and tab are
escaped as \\\\, \\", \\n, \\r and \\t so a multi-line comment stays on one
wire line. A string that is not a plain word is always quoted on encode,
which keeps ``decode(encode(m)) == m``.
"""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from ..errors import DecodeError

PROTOCOL_MAJOR = 1
LINE_TERMINATOR = "\r\n"

# Closed verb set
VERBS = frozenset({
    "kgp",      # greeting (server)
    "mode",     # greeting reply (client)
    "auth",     # challenge (server) / response (client)
    "state",    # board update and decision request
    "move",     # move submission
    "stop",     # stop directive
    "comment",  # free-text comment on the position
    "set",      # option set
    "get",      # option query
    "ping",
    "pong",
    "ok",
    "error",
    "goodbye",
})

Arg = Union[int, str]

_HEAD_RE = re.compile(r"([0-9]+)(?:@([0-9]+))?")
_INT_RE = re.compile(r"-?[0-9]+")
_WORD_RE = re.compile(r'[^\s"\\]+')

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}
_UNESCAPES = {"\\": "\\", '"': '"', "n": "\n", "r": "\r", "t": "\t"}


@dataclass(frozen=True)
class Message:
    """One protocol unit. Immutable.

    Only values that survive the wire are accepted: ``id >= 1``,
    ``ref >= 0``, a verb from VERBS and int or str arguments. Raises
    ValueError or TypeError otherwise.
    """
    id: int
    verb: str
    args: Tuple[Arg, ...] = ()
    ref: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))
        if not _is_int(self.id):
            raise TypeError(f"message id must be an int, got {self.id!r}")
        if self.id < 1:
            raise ValueError(f"message id must be positive, got {self.id}")
        if self.ref is not None:
            if not _is_int(self.ref):
                raise TypeError(f"message ref must be an int, got {self.ref!r}")
            if self.ref < 0:
                raise ValueError(f"message ref must not be negative, got {self.ref}")
        if self.verb not in VERBS:
            raise ValueError(f"unknown verb: {self.verb!r}")
        for arg in self.args:
            if not (_is_int(arg) or isinstance(arg, str)):
                raise TypeError(f"argument must be int or str, got {type(arg).__name__}")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class MessageIds:
    """Strictly increasing ids for outbound messages, starting at 1."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def __next__(self) -> int:
        return next(self._counter)

    def __iter__(self) -> Iterator[int]:
        return self


# ══════════════════════════════════════════════════════════════
# ENCODE
# ══════════════════════════════════════════════════════════════

def encode_arg(arg: Arg) -> str:
    """Encode one argument. Integers are bare, strings quoted when needed."""
    if isinstance(arg, int):
        return str(int(arg))
    if isinstance(arg, str):
        if _WORD_RE.fullmatch(arg) and not _INT_RE.fullmatch(arg):
            return arg
        return '"' + "".join(_ESCAPES.get(ch, ch) for ch in arg) + '"'
    raise TypeError(f"Cannot encode argument of type {type(arg).__name__}")


def encode(message: Message) -> str:
    """Encode a Message as a wire line (without terminator)."""
    head = str(message.id)
    if message.ref is not None:
        head = f"{head}@{message.ref}"
    return " ".join([head, message.verb, *(encode_arg(a) for a in message.args)])


# ══════════════════════════════════════════════════════════════
# DECODE
# ══════════════════════════════════════════════════════════════

def _tokenize(text: str, line: str) -> List[Tuple[bool, str]]:
    """Split ``text`` into (quoted, value) tokens."""
    tokens: List[Tuple[bool, str]] = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch.isspace():
            i += 1
            continue
        if ch == '"':
            i += 1
            buf = []
            while True:
                if i >= n:
                    raise DecodeError("unterminated string", line=line)
                ch = text[i]
                if ch == "\\":
                    esc = text[i + 1] if i + 1 < n else ""
                    if esc not in _UNESCAPES:
                        raise DecodeError(f"unknown escape sequence \\{esc}", line=line)
                    buf.append(_UNESCAPES[esc])
                    i += 2
                elif ch == '"':
                    i += 1
                    break
                else:
                    buf.append(ch)
                    i += 1
            if i < n and not text[i].isspace():
                raise DecodeError("missing delimiter after string", line=line)
            tokens.append((True, "".join(buf)))
        else:
            start = i
            while i < n and not text[i].isspace():
                if text[i] in '"\\':
                    raise DecodeError("stray quote or backslash in word", line=line)
                i += 1
            tokens.append((False, text[start:i]))
    return tokens


def decode(line: str) -> Message:
    """Decode one wire line. Raises DecodeError when it does not match the grammar."""
    text = line.rstrip("\r\n")
    tokens = _tokenize(text, line)
    if len(tokens) < 2:
        raise DecodeError("line needs at least a message id and a verb", line=line)

    (quoted, head), (verb_quoted, verb) = tokens[0], tokens[1]
    match = None if quoted else _HEAD_RE.fullmatch(head)
    if match is None:
        raise DecodeError(f"missing or malformed message id: {head!r}", line=line)
    if verb_quoted:
        raise DecodeError(f"unknown verb: {verb!r}", line=line)
    ref = int(match.group(2)) if match.group(2) is not None else None

    args: List[Arg] = []
    for is_quoted, value in tokens[2:]:
        if not is_quoted and _INT_RE.fullmatch(value):
            args.append(int(value))
        else:
            args.append(value)
    try:
        return Message(id=int(match.group(1)), verb=verb, args=tuple(args), ref=ref)
    except ValueError as e:
        raise DecodeError(str(e), line=line) from e
