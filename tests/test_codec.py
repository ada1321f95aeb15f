"""Tests for manifest decoding and encoding."""

import pytest

from skeletor.manifest import (
    DecodeError,
    Manifest,
    Parameter,
    dump_manifest,
    load_manifest_data,
    validate_manifest,
)

FULL_MANIFEST = """\
version: "1.0.0"
parameters:
  - name: project
    prompt: Project name
    type: string
    description: Name of the generated project
    defaultValue: hello
  - name: port
    prompt: Port to listen on
    type: integer
    enum: ["8080", "9090"]
    defaultValue: "8080"
  - name: verbose
    type: boolean
    defaultValue: "false"
"""


class TestLoadManifestData:
    """Tests for load_manifest_data."""

    def test_decodes_all_fields(self) -> None:
        """Test that every recognized field is populated."""
        manifest = load_manifest_data(FULL_MANIFEST)

        assert manifest.version == "1.0.0"
        assert len(manifest.parameters) == 3
        project = manifest.parameters[0]
        assert project.name == "project"
        assert project.prompt == "Project name"
        assert project.type == "string"
        assert project.description == "Name of the generated project"
        assert project.default_value == "hello"
        assert project.enum == ()
        assert manifest.parameters[1].enum == ("8080", "9090")

    def test_preserves_parameter_order(self) -> None:
        """Test that parameters keep their declaration order."""
        manifest = load_manifest_data(FULL_MANIFEST)
        assert [p.name for p in manifest.parameters] == ["project", "port", "verbose"]

    def test_accepts_bytes(self) -> None:
        """Test that UTF-8 bytes decode like text."""
        assert load_manifest_data(FULL_MANIFEST.encode()) == load_manifest_data(
            FULL_MANIFEST
        )

    def test_empty_document_gives_zero_manifest(self) -> None:
        """Test that an empty document decodes to an empty manifest."""
        assert load_manifest_data(b"") == Manifest()

    def test_missing_fields_default_to_zero_values(self) -> None:
        """Test that missing optional fields are empty."""
        manifest = load_manifest_data("parameters:\n  - name: x\n")

        assert manifest.version == ""
        assert manifest.parameters == (Parameter(name="x"),)

    def test_unknown_fields_are_ignored(self) -> None:
        """Test that unrecognized keys do not cause errors."""
        manifest = load_manifest_data(
            "version: 0.1.0\nauthor: someone\n"
            "parameters:\n  - name: x\n    type: string\n    secret: true\n"
        )

        assert manifest.version == "0.1.0"
        assert manifest.parameters == (Parameter(name="x", type="string"),)

    def test_unquoted_scalars_read_as_text(self) -> None:
        """Test that unquoted numbers and booleans become their text form."""
        manifest = load_manifest_data(
            "version: 1.0.0\nparameters:\n"
            "  - name: port\n    type: integer\n    defaultValue: 8080\n"
            "    enum: [80, 443]\n"
            "  - name: debug\n    type: boolean\n    defaultValue: true\n"
        )

        assert manifest.parameters[0].default_value == "8080"
        assert manifest.parameters[0].enum == ("80", "443")
        assert manifest.parameters[1].default_value == "true"

    @pytest.mark.parametrize(
        ("literal", "expected"),
        [
            ("8080.0", "8080"),
            ("1.5", "1.5"),
            ("-2.50", "-2.5"),
            ("0.0", "0"),
            ("0.00001", "1e-05"),
            ("1.5e+6", "1.5e+06"),
            ("123456.0", "123456"),
            (".inf", "+Inf"),
        ],
    )
    def test_unquoted_floats_use_shortest_form(
        self, literal: str, expected: str
    ) -> None:
        """Test that floats are written with the fewest significant digits."""
        manifest = load_manifest_data(
            f"parameters:\n  - name: x\n    defaultValue: {literal}\n"
        )
        assert manifest.parameters[0].default_value == expected

    def test_integral_float_passes_integer_check(self) -> None:
        """Test that an integer default written as 8080.0 validates."""
        manifest = load_manifest_data(
            "version: 1.0.0\nparameters:\n"
            "  - name: port\n    type: integer\n    defaultValue: 8080.0\n"
        )
        validate_manifest(manifest)

    def test_null_values_read_as_empty(self) -> None:
        """Test that null fields decode to their zero values."""
        manifest = load_manifest_data(
            "version:\nparameters:\n  - name: x\n    enum:\n    defaultValue: null\n"
        )

        assert manifest.version == ""
        assert manifest.parameters[0].enum == ()
        assert manifest.parameters[0].default_value == ""

    @pytest.mark.parametrize(
        "content",
        [
            "version: [unclosed",
            "- just\n- a\n- list\n",
            "plain text",
            "parameters: not-a-list\n",
            "parameters:\n  - just-a-string\n",
            "parameters:\n  - name: x\n    enum: not-a-list\n",
            "parameters:\n  - name: {nested: mapping}\n",
            "version: [1, 0, 0]\n",
            "parameters:\n  - name: x\n    enum: [[1, 2]]\n",
        ],
    )
    def test_malformed_documents_raise(self, content: str) -> None:
        """Test that structurally invalid documents raise DecodeError."""
        with pytest.raises(DecodeError):
            load_manifest_data(content)

    def test_invalid_utf8_raises(self) -> None:
        """Test that undecodable bytes raise DecodeError."""
        with pytest.raises(DecodeError, match="UTF-8"):
            load_manifest_data(b"version: \xff\xfe")

    def test_yaml_error_is_chained(self) -> None:
        """Test that the underlying YAML error is kept as the cause."""
        with pytest.raises(DecodeError) as exc_info:
            load_manifest_data("version: [unclosed")
        assert exc_info.value.__cause__ is not None

    def test_does_not_validate(self) -> None:
        """Test that semantically invalid manifests still decode."""
        manifest = load_manifest_data(
            "version: 9.9.9\nparameters:\n  - name: x\n    type: integer\n"
            "    defaultValue: abc\n"
        )

        assert manifest.version == "9.9.9"
        assert manifest.parameters[0].default_value == "abc"


class TestDumpManifest:
    """Tests for dump_manifest."""

    def test_round_trip_is_lossless(self) -> None:
        """Test that dumping and reloading yields an equal manifest."""
        manifest = load_manifest_data(FULL_MANIFEST)
        assert load_manifest_data(dump_manifest(manifest)) == manifest

    def test_round_trip_keeps_ambiguous_strings(self) -> None:
        """Test that strings YAML would resolve to other types survive."""
        manifest = Manifest(
            version="1.0.0",
            parameters=(
                Parameter(
                    name="odd",
                    type="string",
                    enum=("yes", "null", "1.5", "", "~", "\x85", "x\x85y"),
                    default_value="true",
                    description="line one\nline two",
                ),
                Parameter(),
            ),
        )

        assert load_manifest_data(dump_manifest(manifest)) == manifest

    def test_omits_empty_fields(self) -> None:
        """Test that zero-valued fields are not written."""
        text = dump_manifest(
            Manifest(version="1.0.0", parameters=(Parameter(name="x", type="string"),))
        )

        assert "defaultValue" not in text
        assert "enum" not in text
        assert "prompt" not in text

    def test_uses_manifest_key_names(self) -> None:
        """Test that default_value is written as defaultValue."""
        text = dump_manifest(
            Manifest(parameters=(Parameter(name="x", default_value="1"),))
        )
        assert "defaultValue" in text

    def test_empty_manifest_round_trip(self) -> None:
        """Test that an empty manifest survives a round trip."""
        assert load_manifest_data(dump_manifest(Manifest())) == Manifest()
