import logging

from matchkey.core.logging import PIISafeFilter
from matchkey.normalization.email_normalizer import normalize_email


def test_pii_filter_redacts_email_and_phone(caplog):
    logger = logging.getLogger("test.pii")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.pii"):
        logger.info("Contact john.doe@example.com phone +15551234567")

    assert "john.doe@example.com" not in caplog.text
    assert "+15551234567" not in caplog.text
    assert "[REDACTED]" in caplog.text


def test_pii_filter_redacts_args(caplog):
    logger = logging.getLogger("test.args")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.args"):
        logger.info("dropped %s for %s", "555-123-4567", "jane@example.org")

    assert "555-123-4567" not in caplog.text
    assert "jane@example.org" not in caplog.text


def test_pii_filter_redacts_raw_value_assignment(caplog):
    logger = logging.getLogger("test.raw")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.raw"):
        logger.info("normalizing raw_value=John for first_name")

    assert "John" not in caplog.text
    assert "raw_value=[REDACTED]" in caplog.text


def test_pii_filter_keeps_digests(caplog):
    logger = logging.getLogger("test.digest")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())
    value = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    with caplog.at_level(logging.INFO, logger="test.digest"):
        logger.info("digest %s", value)

    assert value in caplog.text


def test_normalizer_rejection_does_not_log_raw_value(caplog):
    with caplog.at_level(logging.DEBUG, logger="matchkey.normalization"):
        assert normalize_email("secret-local-part") is None

    assert "secret-local-part" not in caplog.text
    assert "length=17" in caplog.text
