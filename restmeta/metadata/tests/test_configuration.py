"""Unit tests for MetadataConfiguration.

Covers:
- Default and settable flags
- JSON schema format registration (exact lookup, argument checks)
- Formatting pattern registration (compilation, supertype fallback)
- Freezing and inspection helpers
"""

import numbers
import re
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

import pytest

from restmeta.core.config import Settings
from restmeta.core.errors import (
    ConfigurationFrozenError,
    InvalidArgumentError,
    InvalidPatternError,
    MetadataConfigurationError,
)
from restmeta.metadata import JsonSchemaFormat, MetadataConfiguration


class Code:
    pass


class TestFlags:
    """Test the description-key and ALPS flags."""

    def test_defaults_are_true(self, configuration):
        """Both flags default to True before any mutation."""
        assert configuration.omit_unresolvable_description_keys is True
        assert configuration.alps_enabled is True

    @pytest.mark.parametrize("value", [True, False])
    def test_omit_unresolvable_description_keys_round_trips(self, configuration, value):
        """Setting the omit flag is observable through the getter."""
        configuration.omit_unresolvable_description_keys = value
        assert configuration.omit_unresolvable_description_keys is value

    @pytest.mark.parametrize("value", [True, False])
    def test_alps_enabled_round_trips(self, configuration, value):
        """Setting the ALPS flag is observable through the getter."""
        configuration.alps_enabled = value
        assert configuration.alps_enabled is value

    def test_constructor_overrides_defaults(self):
        """Flags can be given at construction."""
        configuration = MetadataConfiguration(
            omit_unresolvable_description_keys=False, alps_enabled=False
        )
        assert configuration.omit_unresolvable_description_keys is False
        assert configuration.alps_enabled is False

    def test_from_settings(self):
        """from_settings seeds the flags from METADATA_* settings."""
        settings = Settings(
            metadata_omit_unresolvable_description_keys=False,
            metadata_alps_enabled=False,
        )
        configuration = MetadataConfiguration.from_settings(settings)

        assert configuration.omit_unresolvable_description_keys is False
        assert configuration.alps_enabled is False
        assert configuration.is_frozen is False


class TestJsonSchemaFormats:
    """Test register_json_schema_format / get_schema_format_for."""

    def test_register_for_several_types(self, configuration):
        """Every listed type maps to the format."""
        configuration.register_json_schema_format(
            JsonSchemaFormat.DATE_TIME, datetime, date
        )

        assert configuration.get_schema_format_for(datetime) is JsonSchemaFormat.DATE_TIME
        assert configuration.get_schema_format_for(date) is JsonSchemaFormat.DATE_TIME
        assert configuration.get_schema_format_for(UUID) is None

    def test_no_types_is_noop(self, configuration):
        """Registering without types changes nothing."""
        configuration.register_json_schema_format(JsonSchemaFormat.EMAIL)

        assert configuration.get_schema_format_for(str) is None
        assert len(configuration.schema_formats()) == 0

    def test_none_format_rejected(self, configuration):
        """A None format fails and leaves the registry unchanged."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            configuration.register_json_schema_format(None, str)

        assert exc_info.value.argument == "format"
        assert configuration.get_schema_format_for(str) is None

    def test_format_keyword_accepted(self, configuration):
        """A JSON schema keyword string is converted to the enum member."""
        configuration.register_json_schema_format("uuid", UUID)

        assert configuration.get_schema_format_for(UUID) is JsonSchemaFormat.UUID

    def test_unknown_format_keyword_rejected(self, configuration):
        """An unknown keyword fails with InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            configuration.register_json_schema_format("postal-code", str)

    def test_none_type_rejects_whole_call(self, configuration):
        """A None entry fails before any type is registered."""
        with pytest.raises(InvalidArgumentError):
            configuration.register_json_schema_format(JsonSchemaFormat.DATE, date, None)

        assert configuration.get_schema_format_for(date) is None

    def test_non_class_type_rejected(self, configuration):
        """Only classes can be registered."""
        with pytest.raises(InvalidArgumentError):
            configuration.register_json_schema_format(JsonSchemaFormat.DATE, "date")

    def test_last_registration_wins(self, configuration):
        """Re-registering a type replaces the earlier format."""
        configuration.register_json_schema_format(JsonSchemaFormat.DATE, date)
        configuration.register_json_schema_format(JsonSchemaFormat.DATE_TIME, date)

        assert configuration.get_schema_format_for(date) is JsonSchemaFormat.DATE_TIME

    def test_lookup_has_no_supertype_fallback(self, configuration):
        """Format lookup is exact-match only."""
        configuration.register_json_schema_format(JsonSchemaFormat.DATE, date)

        # datetime is a subclass of date
        assert configuration.get_schema_format_for(datetime) is None

    def test_non_class_lookup_is_absent(self, configuration):
        """Format lookups are total: unhashable or non-class arguments yield None."""
        configuration.register_json_schema_format(JsonSchemaFormat.DATE, date)

        assert configuration.get_schema_format_for([]) is None
        assert configuration.get_schema_format_for("date") is None


class TestFormattingPatterns:
    """Test register_formatting_pattern_for / get_pattern_for."""

    def test_exact_match(self, number_pattern_configuration):
        """The registered type returns its compiled pattern."""
        pattern = number_pattern_configuration.get_pattern_for(numbers.Number)

        assert isinstance(pattern, re.Pattern)
        assert pattern.pattern == r"\d+"

    def test_subtype_falls_back_to_registered_supertype(self, number_pattern_configuration):
        """int is a (virtual) subtype of numbers.Number and gets its pattern."""
        expected = number_pattern_configuration.get_pattern_for(numbers.Number)

        assert number_pattern_configuration.get_pattern_for(int) is expected
        assert number_pattern_configuration.get_pattern_for(Decimal) is expected

    def test_unrelated_type_is_absent(self, number_pattern_configuration):
        """Types with no registered ancestor have no pattern."""
        assert number_pattern_configuration.get_pattern_for(str) is None
        assert number_pattern_configuration.get_pattern_for(Code) is None

    def test_non_class_lookup_is_absent(self, number_pattern_configuration):
        """Lookups are total: non-class arguments yield None."""
        assert number_pattern_configuration.get_pattern_for(None) is None
        assert number_pattern_configuration.get_pattern_for("int") is None

    def test_uppercase_code_scenario(self, configuration):
        """A registered pattern matches and rejects as compiled."""
        configuration.register_formatting_pattern_for("^[A-Z]+$", Code)

        pattern = configuration.get_pattern_for(Code)

        assert pattern.match("ABC")
        assert pattern.match("abc") is None

    @pytest.mark.parametrize("pattern", [None, "", "   "])
    def test_empty_pattern_rejected(self, configuration, pattern):
        """Missing or blank pattern text fails with InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            configuration.register_formatting_pattern_for(pattern, Code)

        assert exc_info.value.argument == "pattern"
        assert configuration.get_pattern_for(Code) is None

    def test_none_type_rejected(self, configuration):
        """A None type fails with InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            configuration.register_formatting_pattern_for(r"\d+", None)

        assert exc_info.value.argument == "type"

    def test_invalid_regex_fails_at_registration(self, configuration):
        """Compilation errors surface immediately as InvalidPatternError."""
        with pytest.raises(InvalidPatternError) as exc_info:
            configuration.register_formatting_pattern_for("[a-z", Code)

        assert exc_info.value.pattern == "[a-z"
        assert isinstance(exc_info.value.__cause__, re.error)
        assert configuration.get_pattern_for(Code) is None

    def test_errors_share_base_class(self):
        """All configuration errors are ValueErrors."""
        assert issubclass(InvalidArgumentError, MetadataConfigurationError)
        assert issubclass(InvalidPatternError, MetadataConfigurationError)
        assert issubclass(MetadataConfigurationError, ValueError)

    def test_last_registration_wins(self, configuration):
        """Re-registering replaces the earlier pattern."""
        configuration.register_formatting_pattern_for("^old$", Code)
        configuration.register_formatting_pattern_for("^new$", Code)

        pattern = configuration.get_pattern_for(Code)

        assert pattern.pattern == "^new$"
        assert pattern.match("old") is None

    def test_nearest_registered_ancestor_wins(self, configuration):
        """The most specific registered class in the MRO is preferred."""

        class Base:
            pass

        class Middle(Base):
            pass

        class Leaf(Middle):
            pass

        configuration.register_formatting_pattern_for("^base$", Base)
        configuration.register_formatting_pattern_for("^middle$", Middle)

        assert configuration.get_pattern_for(Leaf).pattern == "^middle$"
        assert configuration.get_pattern_for(Base).pattern == "^base$"

    def test_specific_abc_beats_object(self, configuration):
        """A registered ABC is more specific than object for its subtypes."""
        configuration.register_formatting_pattern_for("^any$", object)
        configuration.register_formatting_pattern_for("^number$", numbers.Number)

        assert configuration.get_pattern_for(int).pattern == "^number$"
        assert configuration.get_pattern_for(str).pattern == "^any$"


class TestFreeze:
    """Test freeze() and the frozen state."""

    def test_freeze_is_idempotent_and_chains(self, configuration):
        """freeze() returns self and can be called repeatedly."""
        assert configuration.freeze() is configuration
        assert configuration.freeze() is configuration
        assert configuration.is_frozen is True

    def test_frozen_rejects_flag_changes(self, configuration):
        """Flag setters fail once frozen."""
        configuration.freeze()

        with pytest.raises(ConfigurationFrozenError):
            configuration.alps_enabled = False
        with pytest.raises(ConfigurationFrozenError):
            configuration.omit_unresolvable_description_keys = False

        assert configuration.alps_enabled is True
        assert configuration.omit_unresolvable_description_keys is True

    def test_frozen_rejects_registrations(self, number_pattern_configuration):
        """Registration fails once frozen, reads keep working."""
        number_pattern_configuration.freeze()

        with pytest.raises(ConfigurationFrozenError):
            number_pattern_configuration.register_formatting_pattern_for("^x$", Code)
        with pytest.raises(ConfigurationFrozenError):
            number_pattern_configuration.register_json_schema_format(
                JsonSchemaFormat.DATE, date
            )

        assert number_pattern_configuration.get_pattern_for(int).pattern == r"\d+"
        assert number_pattern_configuration.get_pattern_for(Code) is None


class TestInspection:
    """Test read-only snapshots and to_dict()."""

    def test_snapshots_are_read_only(self, number_pattern_configuration):
        """Snapshots cannot be used to mutate the configuration."""
        patterns = number_pattern_configuration.formatting_patterns()

        with pytest.raises(TypeError):
            patterns[Code] = re.compile("x")

        assert list(patterns) == [numbers.Number]

    def test_to_dict(self, number_pattern_configuration):
        """to_dict() keys types by qualified name."""
        number_pattern_configuration.register_json_schema_format(
            JsonSchemaFormat.DATE, date
        )

        data = number_pattern_configuration.to_dict()

        assert data == {
            "omit_unresolvable_description_keys": True,
            "alps_enabled": True,
            "frozen": False,
            "schema_formats": {"datetime.date": "date"},
            "formatting_patterns": {"numbers.Number": r"\d+"},
        }
