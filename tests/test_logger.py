import json
import logging
from prc_keygen.logger import get_logger


def test_json_lines_with_path(tmp_path):
    log_file = tmp_path / "logs" / "prc.log"
    log = get_logger("prc_keygen.test_json", level=logging.DEBUG, to_file=str(log_file))
    try:
        log.info('Rewriting %s', 'out/"odd".cxx', extra={"path": 'out/"odd".cxx'})
        log.debug("no path here")
        for h in log.handlers:
            h.flush()
        lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    finally:
        for h in list(log.handlers):
            h.close()
            log.removeHandler(h)

    assert lines[0]["msg"] == 'Rewriting out/"odd".cxx'
    assert lines[0]["path"] == 'out/"odd".cxx'
    assert lines[0]["level"] == "INFO"
    assert lines[0]["ts"].endswith("Z")
    assert "path" not in lines[1]


def test_handlers_are_not_duplicated():
    log = get_logger("prc_keygen.test_once")
    try:
        assert get_logger("prc_keygen.test_once").handlers == log.handlers
        assert len(log.handlers) == 1
    finally:
        for h in list(log.handlers):
            log.removeHandler(h)
