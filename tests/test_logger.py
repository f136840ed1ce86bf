from chrono.utils.logger import logger, setup_logging


def test_file_sink_is_optional(tmp_path):
    log_file = tmp_path / "calendar.log"
    setup_logging("INFO", str(log_file))
    logger.debug("não deve aparecer")
    logger.info("evento salvo")
    setup_logging("INFO", "")

    content = log_file.read_text(encoding="utf-8")
    assert "evento salvo" in content
    assert "não deve aparecer" not in content
    assert " | INFO     | " in content
