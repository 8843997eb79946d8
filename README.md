# bucketkit

Building blocks for tools that copy, move and sync objects between a local
filesystem and object-storage buckets. It has no dependencies outside the
standard library.

## Installation

```
pip install bucketkit
```

To run the test suite:

```
pip install "bucketkit[test]"
pytest
```

## Modules

- `bucketkit.atomic` – `AtomicBool`, a lock-protected boolean with `set` and
  `get`.
- `bucketkit.errors` – `OperationError` (an operation with its source,
  destination and underlying error; `full_command()` renders
  `"<op> <src> <dst>"`), `MultiError` (an aggregate that flattens nested
  aggregates and ignores `None`; `error_or_none()`), `CancellationError`,
  `ObjectWarning` and its instances `ERR_OBJECT_EXISTS`,
  `ERR_OBJECT_IS_NEWER`, `ERR_OBJECT_SIZES_MATCH`,
  `ERR_OBJECT_IS_NEWER_AND_SIZES_MATCH`, plus `is_cancelation` and
  `is_warning`.
- `bucketkit.messages` – `InfoMessage`, `ErrorMessage`, `DebugMessage` and
  `TraceMessage`; `str()` gives the text form, `to_json()` a compact JSON
  line.
- `bucketkit.log` – `Level` (`TRACE`, `DEBUG`, `INFO`, `ERROR`;
  `Level.from_string` falls back to `INFO`) and `Logger`, which writes one
  line per message as text or JSON, errors to stderr and everything else to
  stdout, under a lock. Module-level `init`, `trace`, `debug`, `info`,
  `error`, `stat` and `close` act on a global logger. `stat` writes
  regardless of the level; after `close` further messages raise
  `RuntimeError`.
- `bucketkit.stat` – `StatCollector`, a thread-safe counter of successes and
  errors per operation, inactive until `enable()` is called. `collect(op)` is
  a context manager that counts the block as an error if it raises.
  `statistics()` returns `Stats`, a list of `Stat` that renders as a
  right-aligned table or, with `to_json()`, as JSON lines. Module-level
  `init_stat`, `collect` and `statistics` use a global collector.
- `bucketkit.reporting` – `print_error` (skips cancellations, expands
  `MultiError`, uses an `OperationError`'s own command), `print_debug` and
  `cleanup_error`, which collapses an error message to a single line.
- `bucketkit.exclude` – `wildcard_to_regexp`,
  `create_excludes_from_wildcard` (empty patterns are dropped) and
  `is_url_excluded`.
- `bucketkit.flags` – `EnumValue`, a value limited to a set of choices;
  `set` raises `ValueError` for anything else.
- `bucketkit.content_type` – `guess_content_type(file)` goes by the file
  name's extension and otherwise sniffs up to the first 512 bytes and rewinds
  the file; `detect_content_type(data)` sniffs bytes only.
- `bucketkit.sync_strategy` – `SizeOnlyStrategy`,
  `SizeAndModificationStrategy`, `new_strategy(size_only)`, `ObjectPair` and
  `compare_objects`, which splits two listings into source-only,
  destination-only and common objects by a key function.
- `bucketkit.command_line` – `FlagSpec`, `command_flags(name)` (the flag
  table of `ls`, `cp`, `rm`, `mv`, `mb`, `rb`, `select`, `du`, `cat`, `run`,
  `sync` and `version`; unknown names raise `ValueError`) and
  `generate_command`.

## Examples

Exclude filters:

```python
from bucketkit.exclude import create_excludes_from_wildcard, is_url_excluded

patterns = create_excludes_from_wildcard(["*.txt", "main*"])
is_url_excluded(patterns, "dir/readme.txt", "dir")   # True
is_url_excluded(patterns, "dir/engine.js", "dir")    # False
```

Deciding whether to sync; objects need `size` and `mod_time` attributes:

```python
from datetime import datetime
from types import SimpleNamespace

from bucketkit.errors import ObjectWarning
from bucketkit.sync_strategy import new_strategy

now = datetime.now()
src = SimpleNamespace(size=10, mod_time=now)
dst = SimpleNamespace(size=10, mod_time=now)

try:
    new_strategy(size_only=True).should_sync(src, dst)
except ObjectWarning as warning:
    print(warning)  # object size matches
```

Building a command line:

```python
from bucketkit.command_line import generate_command

generate_command(
    "cp",
    {"raw": True},
    {"concurrency": 6},
    ["s3://bucket/key1", "s3://bucket/key2"],
)
# 'cp --concurrency=6 --raw=true "s3://bucket/key1" "s3://bucket/key2"'
```

Logging and statistics:

```python
from bucketkit import log, stat
from bucketkit.messages import ErrorMessage

log.init("info", False)
stat.init_stat()

with stat.collect("rm"):
    log.error(ErrorMessage(command="rm file", err="no object found"))

log.stat(stat.statistics())
log.close()
```

## What it does not do

bucketkit is a library of parts. It has no command-line program, no storage
client and no network code: it does not list, upload, download, copy or
delete objects itself, and it does not run the command lines that
`generate_command` builds. Those are left to the application that uses it.