import logging, json, sys, time, os


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record; ``path`` is added when the record names
    the file being generated (``extra={"path": ...}``)."""

    converter = time.gmtime  # Use UTC timestamps

    def __init__(self):
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%SZ")

    def format(self, record):
        entry = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        path = getattr(record, "path", None)
        if path:
            entry["path"] = path
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def get_logger(name="prc_keygen", level=logging.INFO, to_file=None):
    """Structured logger for make-prc-key; diagnostics go to stderr so they
    never mix with generated sources."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        formatter = JsonLineFormatter()
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            # Ensure the directory exists before writing
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
