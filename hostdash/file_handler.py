# file_handler.py
# Output sink for rendered dashboards: atomic write, then optional viewer launch.
import os
import tempfile
import webbrowser
from pathlib import Path

from .logger_setup import logger
from .utils import sha256_bytes


def _current_umask():
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _report_mode(target):
    # keep the mode of the dashboard being replaced, else a normal new-file mode
    try:
        return target.stat().st_mode & 0o777
    except FileNotFoundError:
        return 0o666 & ~_current_umask()


def write_report(html, config):
    """
    Write ``html`` to ``config.output_path`` as UTF-8.

    The document goes to a temp file in the target directory first and is
    moved into place with os.replace, so a failed write leaves the previous
    file (or nothing) behind. OSError propagates to the caller.

    Characters UTF-8 cannot carry (surrogate-escaped bytes from psutil
    mountpoints, for one) are written as '?'.
    """
    target = Path(config.output_path)
    data = html.encode("utf-8", errors="replace")
    digest = sha256_bytes(data)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp, _report_mode(target))
        os.replace(tmp, target)
    except BaseException:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise
    logger.info("Saved dashboard", extra={"extra": {"path": str(target), "sha256": digest}})
    return target


def open_in_viewer(path):
    uri = Path(path).resolve().as_uri()
    opened = webbrowser.open(uri)
    if not opened:
        logger.warning("No default viewer available", extra={"extra": {"uri": uri}})
    return opened


def publish(html, config):
    """Write and optionally open a dashboard. Returns a process exit code."""
    try:
        path = write_report(html, config)
    except OSError as e:
        logger.error("Failed to write dashboard: %s" % e, extra={"extra": {"path": str(config.output_path)}})
        return 1
    print(f"Dashboard saved to: {path}")
    if config.open_report:
        open_in_viewer(path)
    return 0
