"""Reader and writer for the ``key=value`` properties text format.

The bootstrap loader of the container reads the embedded options with
``java.util.Properties.load``, so the writer follows the escaping rules of
``Properties.store``: output is latin-1, and anything outside printable ASCII
is written as a ``\\uXXXX`` escape.
"""
from datetime import datetime
from typing import IO, Mapping

_SPECIAL = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}
_UNESCAPE = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _escape(text: str, is_key: bool) -> str:
    out = []
    for i, ch in enumerate(text):
        if ch == " " and (is_key or i == 0):
            out.append("\\ ")
        elif ch in _SPECIAL:
            out.append(_SPECIAL[ch])
        elif ch in "\\=:#!":
            out.append("\\" + ch)
        elif ord(ch) < 0x20 or ord(ch) > 0x7E:
            out.extend(f"\\u{unit:04X}" for unit in _utf16_units(ch))
        else:
            out.append(ch)
    return "".join(out)


def _utf16_units(ch: str) -> list[int]:
    data = ch.encode("utf-16-be", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "big") for i in range(0, len(data), 2)]


def _escape_comment(text: str) -> str:
    return "".join(
        ch if 0x20 <= ord(ch) <= 0x7E else "".join(f"\\u{unit:04X}" for unit in _utf16_units(ch))
        for ch in text
    )


def dumps(values: Mapping[str, str], comment: str | None = None, timestamp: datetime | None = None) -> str:
    lines = []
    if comment:
        lines.extend("#" + _escape_comment(line) for line in comment.splitlines())
    stamp = timestamp or datetime.now().astimezone()
    lines.append("#" + stamp.strftime("%a %b %d %H:%M:%S %Z %Y"))
    for key, value in values.items():
        lines.append(f"{_escape(str(key), is_key=True)}={_escape(str(value), is_key=False)}")
    return "\n".join(lines) + "\n"


def store(values: Mapping[str, str], stream: IO[bytes], comment: str | None = None) -> None:
    stream.write(dumps(values, comment).encode("latin-1"))


def _logical_lines(text: str):
    pending = ""
    for raw in text.splitlines():
        line = raw.lstrip(" \t\f")
        if not pending and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue
        yield pending + line
        pending = ""
    if pending:
        yield pending


def _unescape(text: str) -> str:
    out = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\" or i + 1 == len(text):
            out.append(ch)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u":
            out.append(chr(int(text[i + 2:i + 6], 16)))
            i += 6
            continue
        out.append(_UNESCAPE.get(nxt, nxt))
        i += 2
    # rejoin surrogate pairs produced by \uXXXX escapes, lone ones are kept as is
    return "".join(out).encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def _split(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "=: \t\f":
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return key, rest


def loads(text: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split(line)
        values[_unescape(key)] = _unescape(value)
    return values


def load(stream: IO[bytes]) -> dict[str, str]:
    return loads(stream.read().decode("latin-1"))
