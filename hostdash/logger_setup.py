# logger_setup.py
import json
import logging
import logging.handlers
import os


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "msg": record.getMessage()
        }
        if hasattr(record, "extra"):
            base.update(record.extra)
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


logger = logging.getLogger("hostdash")
logger.setLevel(logging.INFO)


def init_logger(log_dir=None, level="INFO"):
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(lvl)
    # avoid duplicate handlers when a CLI runs twice in one process
    if log_dir and not any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers):
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, "events.jsonl"), maxBytes=5*1024*1024, backupCount=5, encoding="utf-8"
        )
        fh.setFormatter(JsonFormatter())
        logger.addHandler(fh)
    # console
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(JsonFormatter())
        logger.addHandler(ch)
    logger.debug("Logger initialized", extra={"extra": {"log_dir": log_dir, "level": level}})
    return logger
