#!/usr/bin/env python3
"""System dashboard: OS, CPU, RAM and per-disk usage as a static HTML page."""
import argparse

import psutil

from . import renderer, sysinfo
from .config import load_config, report_config
from .file_handler import publish
from .logger_setup import init_logger, logger


def build_dashboard(snapshot):
    title = f"System Information: {snapshot['os']['host_name']}"
    return renderer.render(
        title,
        snapshot["disks"],
        sysinfo.summary_metrics(snapshot),
        sysinfo.DISK_FIELD,
        show_clock=True,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate a system information HTML dashboard")
    parser.add_argument("output", nargs="?", default=None, help="Output file (default: SystemInfo.html in the temp dir)")
    parser.add_argument("--no-open", action="store_true", help="Don't open the dashboard in a browser")
    args = parser.parse_args(argv)

    cfg = load_config()
    init_logger(cfg["LOG_DIR"], cfg["LOG_LEVEL"])
    report_cfg = report_config(cfg, "system", output=args.output, open_report=not args.no_open)

    try:
        snapshot = sysinfo.collect_snapshot()
    except (psutil.Error, OSError) as e:
        logger.error("Failed to collect system metrics: %s" % e)
        return 1

    return publish(build_dashboard(snapshot), report_cfg)


if __name__ == "__main__":
    raise SystemExit(main())
