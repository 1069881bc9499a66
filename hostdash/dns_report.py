#!/usr/bin/env python3
"""DNS cache dashboard: dump the resolver cache and render it as searchable cards."""
import argparse

from . import dns_cache, renderer
from .config import load_config, report_config
from .file_handler import publish
from .logger_setup import init_logger, logger

TITLE = "DNS Cache"


def build_dashboard(records, search=""):
    return renderer.render(
        TITLE,
        records,
        dns_cache.summary_metrics(records),
        dns_cache.DESIGNATED_FIELD,
        search=search,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render the local DNS resolver cache as an HTML dashboard")
    parser.add_argument("--input", help="Parse a saved 'ipconfig /displaydns' dump instead of the live cache")
    parser.add_argument("--search", default="", help="Pre-fill the search box")
    parser.add_argument("--no-open", action="store_true", help="Don't open the dashboard in a browser")
    args = parser.parse_args(argv)

    cfg = load_config()
    init_logger(cfg["LOG_DIR"], cfg["LOG_LEVEL"])
    report_cfg = report_config(cfg, "dns", open_report=not args.no_open)

    try:
        lines = dns_cache.load_dump(args.input) if args.input else dns_cache.read_dns_cache()
    except dns_cache.DnsCacheError as e:
        logger.error("Failed to read DNS cache: %s" % e)
        return 1

    records = dns_cache.parse(lines)
    logger.info("DNS cache parsed", extra={"extra": {"records": len(records)}})
    return publish(build_dashboard(records, args.search), report_cfg)


if __name__ == "__main__":
    raise SystemExit(main())
