"""Tests for the validation pipeline around the format stage."""

from unittest import mock

import pytest

from json_format_validator import validate_formats
from json_format_validator.exceptions import SchemaStructureError
from json_format_validator.format.attribute import FormatAttribute
from json_format_validator.keyword.validator import KeywordValidator
from json_format_validator.library.dictionary import Dictionary
from json_format_validator.messages import FormatMessages
from json_format_validator.processing.format.format_processor import FormatProcessor
from json_format_validator.processing.processor import Processor, ProcessorChain
from json_format_validator.processing.validation_context import FullValidationContext
from json_format_validator.processing.validation_data import ValidationData
from json_format_validator.processing.validation_processor import ValidationProcessor
from json_format_validator.report.processing_report import ListProcessingReport
from json_format_validator.tree.json_tree import JsonTree, SchemaTree
from json_format_validator.utils.node_type import NodeType


class AppendingStage(Processor):
    """Stage appending a fixed validator to every context."""

    def __init__(self, validator):
        self.validator = validator

    def process(self, report, input):
        return input.with_validator(self.validator)


def _data(schema, instance):
    return ValidationData(SchemaTree(schema), JsonTree(instance))


class TestProcessorChain:

    def test_stages_run_in_order(self, report):
        first = mock.MagicMock(spec=KeywordValidator)
        attr = mock.MagicMock(spec=FormatAttribute)
        attr.supported_types.return_value = frozenset({NodeType.STRING})
        dictionary = Dictionary.new_builder().add_entry("fmt", attr).freeze()
        chain = ProcessorChain(AppendingStage(first)).then(FormatProcessor(dictionary))

        out = chain.process(report, FullValidationContext(_data({"format": "fmt"}, "x")))

        validators = list(out)
        assert validators[0] is first
        assert validators[1].attribute is attr

    def test_empty_chain_is_rejected(self):
        with pytest.raises(ValueError):
            ProcessorChain()


class TestValidationProcessor:

    def test_collected_validators_run_with_pipeline_report_and_data(self, report):
        validators = [mock.MagicMock(spec=KeywordValidator) for _ in range(2)]
        pipeline = ValidationProcessor(ProcessorChain(*(AppendingStage(v) for v in validators)))
        data = _data({}, None)

        result = pipeline.process(report, data)

        assert result is report
        for validator in validators:
            validator.validate.assert_called_once_with(pipeline, report, data)

    def test_format_failures_end_up_in_report(self):
        report = validate_formats({"format": "ipv4"}, "999.1.1.1")

        assert not report.is_success()
        assert report.errors[0].message == FormatMessages.INVALID_IPV4

    def test_valid_instance(self):
        report = validate_formats({"format": "date-time"}, "2013-01-09T12:34:56Z")

        assert report.is_success()
        assert report.messages == []

    def test_unknown_format_is_only_a_warning(self):
        report = validate_formats({"format": "phone"}, "+1 555 0100")

        assert report.is_success()
        assert [m.get("attribute") for m in report.warnings] == ["phone"]

    def test_inapplicable_type_is_silent(self):
        report = validate_formats({"format": "email"}, 42)

        assert report.is_success()
        assert report.messages == []

    def test_nested_pointers(self):
        schema = {"properties": {"ip": {"format": "ipv6"}}}
        instance = {"ip": "not-an-ip"}

        report = validate_formats(schema, instance, schema_pointer="/properties/ip", instance_pointer="/ip")

        assert report.errors[0].get("pointer") == "/ip"

    def test_custom_dictionary_and_report(self):
        attr = mock.MagicMock(spec=FormatAttribute)
        attr.supported_types.return_value = frozenset({NodeType.INTEGER})
        dictionary = Dictionary.new_builder().add_entry("even", attr).freeze()
        report = ListProcessingReport()

        result = validate_formats({"format": "even"}, 3, dictionary=dictionary, report=report)

        assert result is report
        attr.validate.assert_called_once()
        called_report, called_data = attr.validate.call_args[0]
        assert called_report is report
        assert called_data.instance.node == 3

    def test_structural_errors_propagate(self):
        with pytest.raises(SchemaStructureError):
            validate_formats({"format": 12}, "x")
