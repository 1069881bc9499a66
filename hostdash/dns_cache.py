"""
DNS resolver cache: acquisition of the raw dump and parsing into records.

The dump (``ipconfig /displaydns``) is a sequence of blocks:

    www.example.com
    ----------------------------------------
        Record Name . . . . . : www.example.com
        Record Type . . . . . : 1
        A (Host) Record . . . : 93.184.216.34

``parse`` only sees already-split lines; ``read_dns_cache`` and ``load_dump``
are the thin layers that get those lines from the OS or from a saved file.
"""

import os
import re
import subprocess
from collections import Counter
from pathlib import Path

from .logger_setup import logger
from .records import RecordBuilder, normalize_key

DESIGNATED_FIELD = "RecordName"
DNS_COMMAND = ["ipconfig", "/displaydns"]
BLOCK_INDENT = "    "

SEPARATOR_RE = re.compile(r"^-+$")

# numeric "Record Type" codes printed by ipconfig
RECORD_TYPES = {
    "1": "A",
    "2": "NS",
    "5": "CNAME",
    "6": "SOA",
    "12": "PTR",
    "15": "MX",
    "16": "TXT",
    "28": "AAAA",
    "33": "SRV",
    "65": "HTTPS",
}


class DnsCacheError(Exception):
    """The resolver cache dump could not be obtained."""


def _is_boundary(lines, i):
    line = lines[i]
    if not line.strip() or line[:1].isspace():
        return False
    return i + 1 < len(lines) and bool(SEPARATOR_RE.match(lines[i + 1].strip()))


def parse(lines):
    """
    Group dump lines into records, one per boundary line.

    A boundary is a non-indented, non-blank line directly followed by a line
    of dashes. Lines with ": " inside a block become fields; everything else
    (blank lines, text before the first block) is ignored. Never raises.
    """
    lines = list(lines)
    records = []
    current = None
    i = 0
    while i < len(lines):
        if _is_boundary(lines, i):
            if current is not None:
                records.append(current.build())
            current = RecordBuilder(DESIGNATED_FIELD, lines[i].strip())
            i += 2  # skip the separator
            continue

        text = lines[i].strip()
        if current is not None and ": " in text:
            # first colon only, values like 2001:db8::1 keep theirs
            key, value = text.split(":", 1)
            current.set(normalize_key(key.strip()), value.strip())
        i += 1

    if current is not None:
        records.append(current.build())
    return records


def _outdent(lines):
    # ipconfig indents every block by four spaces
    return [line[len(BLOCK_INDENT):] if line.startswith(BLOCK_INDENT) else line for line in lines]


def _dump_encoding(name=None):
    # Windows console tools write in the OEM code page, not the ANSI one
    name = name or os.name
    return "oem" if name == "nt" else None


def read_dns_cache(cmd=None, timeout=60):
    """Run the cache dump command and return its output as lines."""
    cmd = cmd or DNS_COMMAND
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding=_dump_encoding(),
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise DnsCacheError(f"command not available: {' '.join(cmd)}") from e
    except (OSError, subprocess.SubprocessError) as e:
        raise DnsCacheError(f"command failed: {' '.join(cmd)}: {e}") from e

    if result.returncode != 0:
        raise DnsCacheError(f"{' '.join(cmd)} exited with {result.returncode}: {result.stdout.strip()[:200]}")

    lines = _outdent(result.stdout.splitlines())
    logger.info("DNS cache dumped", extra={"extra": {"cmd": cmd, "lines": len(lines)}})
    return lines


def load_dump(path):
    """Read a previously saved dump file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DnsCacheError(f"cannot read {path}: {e}") from e
    lines = _outdent(text.splitlines())
    logger.info("DNS dump loaded", extra={"extra": {"path": str(path), "lines": len(lines)}})
    return lines


def record_type(record):
    code = record.get("RecordType", "")
    return RECORD_TYPES.get(code, code or "unknown")


def summary_metrics(records):
    """Total count, distinct names and a per-type breakdown."""
    metrics = {
        "Total records": len(records),
        "Unique names": len({r.name for r in records}),
    }
    for rtype, count in sorted(Counter(record_type(r) for r in records).items()):
        metrics[f"{rtype} records"] = count
    return metrics
