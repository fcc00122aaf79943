"""Unit tests for the structured schema logger."""

import logging

from steer_schema.observability import SchemaLogger


class TestSchemaLogger:
    """Test structured message formatting."""

    def test_format_message_skips_none_fields(self):
        logger = SchemaLogger("derivation")
        message = logger._format_message("Deriving", type="Person", depth=0, reason=None)
        assert message == "[component=derivation type=Person depth=0] Deriving"

    def test_error_includes_exception(self, caplog):
        logger = SchemaLogger("rendering")
        with caplog.at_level(logging.ERROR, logger="steer_schema.rendering"):
            logger.error("Failed", type_name="Node", error=ValueError("boom"))
        assert "error_type=ValueError" in caplog.text
        assert "error_msg=boom" in caplog.text

    def test_warning_includes_fields(self, caplog):
        logger = SchemaLogger("derivation")
        with caplog.at_level(logging.WARNING, logger="steer_schema.derivation"):
            logger.warning("Falling back", type_name="Any", reason="unclassifiable type")
        assert "[component=derivation type=Any reason=unclassifiable type] Falling back" in caplog.text

    def test_debug_emitted_when_enabled(self, caplog):
        logger = SchemaLogger("derivation")
        with caplog.at_level(logging.DEBUG, logger="steer_schema.derivation"):
            logger.debug("Deriving object schema", type_name="Person", members=2)
        assert "[component=derivation type=Person members=2] Deriving object schema" in caplog.text
