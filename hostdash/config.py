# config.py
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DNS_REPORT_NAME = "DNSCache.html"
SYSTEM_REPORT_NAME = "SystemInfo.html"
TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ReportConfig:
    """Where a dashboard goes and whether it is opened afterwards."""
    output_path: Path
    open_report: bool = True


def _as_bool(value):
    return str(value).strip().lower() in TRUE_VALUES


# simple config from .env + env
def load_config():
    load_dotenv(find_dotenv(usecwd=True))
    tmp = tempfile.gettempdir()
    cfg = {
        "DNS_OUTPUT": os.getenv("HOSTDASH_DNS_OUTPUT", os.path.join(os.getcwd(), DNS_REPORT_NAME)),
        "SYSTEM_OUTPUT": os.getenv("HOSTDASH_SYSTEM_OUTPUT", os.path.join(tmp, SYSTEM_REPORT_NAME)),
        "OPEN_REPORT": _as_bool(os.getenv("HOSTDASH_OPEN_REPORT", "1")),
        "LOG_DIR": os.getenv("HOSTDASH_LOG_DIR", os.path.join(tmp, "hostdash_logs")),
        "LOG_LEVEL": os.getenv("HOSTDASH_LOG_LEVEL", "INFO"),
        "PREVIEW_HOST": os.getenv("HOSTDASH_PREVIEW_HOST", "127.0.0.1"),
        "PREVIEW_PORT": int(os.getenv("HOSTDASH_PREVIEW_PORT", "5001")),
    }
    return cfg


def report_config(cfg, kind, output=None, open_report=True):
    """
    Build the ReportConfig for one dashboard kind ("dns" or "system").
    An explicit output path wins over the configured one.
    """
    key = {"dns": "DNS_OUTPUT", "system": "SYSTEM_OUTPUT"}[kind]
    path = Path(output or cfg[key]).expanduser()
    return ReportConfig(output_path=path, open_report=bool(cfg["OPEN_REPORT"] and open_report))
