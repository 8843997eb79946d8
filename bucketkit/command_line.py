"""Command flag tables and generation of command lines from flag values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

DEFAULT_COPY_CONCURRENCY = 5
DEFAULT_PART_SIZE = 50  # MiB


@dataclass(frozen=True)
class FlagSpec:
    """Description of one command flag."""

    name: str
    kind: type
    aliases: tuple[str, ...] = ()
    default: Any = None
    usage: str = ""

    @property
    def names(self) -> tuple[str, ...]:
        """The primary name followed by the aliases."""
        return (self.name, *self.aliases)

    def format_values(self, value: Any) -> list[str]:
        """Render ``value`` as the strings this flag is given on a command line."""
        if self.kind is list:
            items = [value] if isinstance(value, str) else list(value)
            return [str(item) for item in items]
        if self.kind is bool:
            return ["true" if value else "false"]
        if self.kind is int:
            return [str(int(value))]
        return [_format_value(value)]


_EXCLUDE = FlagSpec("exclude", list, usage="exclude objects with given pattern")
_RAW = FlagSpec(
    "raw",
    bool,
    usage="disable the wildcard operations, useful with filenames that contains glob characters",
)
_HUMANIZE = FlagSpec("humanize", bool, ("H",), usage="human-readable output for object sizes")
_FORCE_GLACIER = FlagSpec(
    "force-glacier-transfer",
    bool,
    usage="force transfer of glacier objects whether they are restored or not",
)

_SHARED_FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec("no-follow-symlinks", bool, usage="do not follow symbolic links"),
    FlagSpec(
        "storage-class",
        str,
        usage="set storage class for target ('STANDARD','REDUCED_REDUNDANCY','GLACIER',"
        "'STANDARD_IA','ONEZONE_IA','INTELLIGENT_TIERING','DEEP_ARCHIVE')",
    ),
    FlagSpec(
        "concurrency",
        int,
        ("c",),
        DEFAULT_COPY_CONCURRENCY,
        "number of concurrent parts transferred between host and remote server",
    ),
    FlagSpec(
        "part-size",
        int,
        ("p",),
        DEFAULT_PART_SIZE,
        "size of each part transferred between host and remote server, in MiB",
    ),
    FlagSpec("sse", str, usage="perform server side encryption of the data at its destination, e.g. aws:kms"),
    FlagSpec(
        "sse-kms-key-id",
        str,
        usage="customer master key (CMK) id for SSE-KMS encryption; "
        "leave it out if server-side generated key is desired",
    ),
    FlagSpec("acl", str, usage="set acl for target: defines granted accesses and their types"),
    FlagSpec("cache-control", str, usage="set cache control header for target object"),
    FlagSpec("expires", str, usage="set expires header for target object (RFC3339 format)"),
    _FORCE_GLACIER,
    FlagSpec(
        "ignore-glacier-warnings",
        bool,
        usage="turns off glacier warnings: ignore errors encountered with glacier objects",
    ),
    FlagSpec("source-region", str, usage="set the region of source bucket"),
    FlagSpec("destination-region", str, usage="set the region of destination bucket"),
    _EXCLUDE,
    _RAW,
)

_COPY_FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec(
        "flatten",
        bool,
        ("f",),
        usage="flatten directory structure of source, starting from the first wildcard",
    ),
    FlagSpec("no-clobber", bool, ("n",), usage="do not overwrite destination if already exists"),
    FlagSpec("if-size-differ", bool, ("s",), usage="only overwrite destination if size differs"),
    FlagSpec("if-source-newer", bool, ("u",), usage="only overwrite destination if source modtime is newer"),
    *_SHARED_FLAGS,
)

_SYNC_FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec("delete", bool, usage="delete objects in destination but not in source"),
    FlagSpec(
        "size-only",
        bool,
        usage="make size of object only criteria to decide whether an object should be synced",
    ),
    *_SHARED_FLAGS,
)

_COMMANDS: dict[str, tuple[FlagSpec, ...]] = {
    "ls": (
        FlagSpec("etag", bool, ("e",), usage="show entity tag (ETag) in the output"),
        _HUMANIZE,
        FlagSpec("storage-class", bool, ("s",), usage="display full name of the object class"),
        _EXCLUDE,
    ),
    "cp": _COPY_FLAGS,
    "rm": (_RAW, _EXCLUDE),
    "mv": _COPY_FLAGS,
    "mb": (),
    "rb": (),
    "select": (
        FlagSpec("query", str, ("e",), usage="SQL expression to use to select from the objects"),
        FlagSpec("compression", str, default="NONE", usage="input compression format"),
        FlagSpec("format", str, default="JSON", usage="input data format (only JSON supported for the moment)"),
        _EXCLUDE,
        _FORCE_GLACIER,
        FlagSpec(
            "ignore-glacier-warnings",
            bool,
            usage="turns off glacier warnings: ignore errors encountered during selecting objects",
        ),
    ),
    "du": (
        FlagSpec("group", bool, ("g",), usage="group sizes by storage class"),
        _HUMANIZE,
        _EXCLUDE,
    ),
    "cat": (),
    "run": (),
    "sync": _SYNC_FLAGS,
    "version": (),
}


def command_flags(name: str) -> tuple[FlagSpec, ...]:
    """Return the flags of the command ``name``; raise ValueError if it is unknown."""
    try:
        return _COMMANDS[name]
    except KeyError:
        raise ValueError(f"{name!r} command not found") from None


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(text: str) -> str:
    """Return ``text`` double-quoted, escaping control and special characters."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) < 0x10000:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(parts) + '"'


def generate_command(
    command: str,
    default_flags: Optional[Mapping[str, Any]] = None,
    set_flags: Optional[Mapping[str, Any]] = None,
    args: Iterable[Any] = (),
) -> str:
    """Build a command line for ``command``.

    ``default_flags`` are always given and take precedence over ``set_flags``,
    the explicitly set flag values, of which only those the command accepts are
    kept. Flags are sorted and followed by the quoted ``args``.
    """
    specs = command_flags(command)
    default_flags = dict(default_flags or {})
    set_flags = dict(set_flags or {})

    flags = [f"--{name}={_format_value(value)}" for name, value in default_flags.items()]

    for spec in specs:
        if spec.name in default_flags:
            continue
        given = next((set_flags[name] for name in spec.names if name in set_flags), _MISSING)
        if given is _MISSING:
            continue
        flags.extend(f"--{spec.name}={value}" for value in spec.format_values(given))

    flags.sort()
    words = [command, *flags, *(_quote(str(arg)) for arg in args)]
    return " ".join(words).strip()


_MISSING = object()