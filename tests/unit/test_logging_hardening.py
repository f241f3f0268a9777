import logging

from spesen.logging_hardening import SecretRedactionFilter, redact


def _record(msg, args=()):
    return logging.LogRecord("spesen.test", logging.INFO, __file__, 1, msg, args, None)


def test_redacts_iban_plain_and_grouped():
    assert "DE89" not in redact("iban=DE89370400440532013000")
    assert "[REDACTED_IBAN]" in redact("iban DE89 3704 0044 0532 0130 00 stored")


def test_redacts_envelopes(codec):
    envelope = codec.encrypt("DE89370400440532013000")
    assert envelope not in redact(f"row iban={envelope}")
    assert "[REDACTED_ENVELOPE]" in redact(f"row iban={envelope}")


def test_leaves_ordinary_messages_alone():
    msg = "Created banking details 0192f3a4-1b2c-7d3e-8f40-123456789abc for user user-1"
    assert redact(msg) == msg


def test_filter_redacts_message_and_args():
    record = _record("Decrypt %s for %s", ("DE89370400440532013000", 42))

    assert SecretRedactionFilter().filter(record) is True
    assert record.args == ("[REDACTED_IBAN]", 42)
    assert "DE89" not in record.getMessage()


def test_filter_ignores_non_string_messages():
    record = _record({"iban": "DE89370400440532013000"})
    assert SecretRedactionFilter().filter(record) is True
    assert record.msg == {"iban": "DE89370400440532013000"}
