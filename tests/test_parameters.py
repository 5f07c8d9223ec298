"""
Unit tests for the parameter model and its classification.
"""

import pytest

from paramdisplay.utils.parameters import (
    Field,
    Parameter,
    ParameterKind,
    classify_parameter,
    field_from_dict,
    get_parameter_subtype,
    get_parameter_type,
    is_field_filter_parameter,
    parameter_from_dict,
)


@pytest.mark.parametrize(
    "type_string, expected",
    [
        ("date/range", "date"),
        ("number/=", "number"),
        ("string/=", "string"),
        ("category", "category"),
        ("location/city", "location"),
        ("", ""),
    ],
)
def test_get_parameter_type_uses_prefix(type_string: str, expected: str) -> None:
    assert get_parameter_type(type_string) == expected
    assert get_parameter_type(Parameter(id="p", name="P", type=type_string)) == expected


def test_get_parameter_subtype() -> None:
    assert get_parameter_subtype("date/month-year") == "month-year"
    assert get_parameter_subtype("category") is None


def test_date_parameter_is_date_even_with_fields(region_field: Field) -> None:
    parameter = Parameter(id="d", name="D", type="date/single", fields=[region_field])
    assert classify_parameter(parameter) is ParameterKind.DATE


def test_variable_bound_field_filter(region_field: Field) -> None:
    parameter = Parameter(
        id="c",
        name="C",
        type="category",
        fields=[region_field],
        has_only_field_targets=False,
    )
    assert classify_parameter(parameter) is ParameterKind.FIELD_FILTER_VARIABLE


@pytest.mark.parametrize("targets", [True, None])
def test_field_filter_with_fields(region_field: Field, targets) -> None:
    parameter = Parameter(
        id="c", name="C", type="string/=", fields=[region_field], has_only_field_targets=targets
    )
    assert classify_parameter(parameter) is ParameterKind.FIELD_FILTER


def test_field_filter_without_fields_is_unbound() -> None:
    parameter = Parameter(id="n", name="N", type="number/=", fields=[])
    assert is_field_filter_parameter(parameter)
    assert classify_parameter(parameter) is ParameterKind.FIELD_FILTER_UNBOUND


def test_primitive_parameters() -> None:
    assert classify_parameter(Parameter(id="n", name="N", type="number/=")) is ParameterKind.NUMBER
    assert classify_parameter(Parameter(id="s", name="S", type="string/=")) is ParameterKind.TEXT
    assert classify_parameter(Parameter(id="t", name="T", type="category")) is ParameterKind.TEXT


def test_remapped_value_matches_string_codes(status_field: Field) -> None:
    assert status_field.remapped_value(1) == "Active"
    assert status_field.remapped_value("2") == "Closed"
    assert status_field.remapped_value(3) is None
    assert status_field.remapped_value([1]) is None


def test_parameter_from_dict_reads_frontend_keys() -> None:
    parameter = parameter_from_dict(
        {
            "id": "abc",
            "name": "Status",
            "slug": "status",
            "type": "category",
            "hasOnlyFieldTargets": True,
            "fields": [
                {"id": 1, "base_type": "type/Integer", "remapping": [[1, "Active"]]},
            ],
        }
    )

    assert parameter.id == "abc"
    assert parameter.has_only_field_targets is True
    assert parameter.fields[0].remapping == {1: "Active"}
    assert classify_parameter(parameter) is ParameterKind.FIELD_FILTER


def test_parameter_from_dict_without_fields_is_not_field_filter() -> None:
    parameter = parameter_from_dict({"slug": "q", "type": "string/="})
    assert parameter.fields is None
    assert parameter.id == "q"


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"name": "x"}, "missing 'type'"),
        ({"type": "category", "fields": "nope"}, "must be a list"),
        ({"type": "category", "fields": [{"id": 1}]}, "missing 'base_type'"),
        ({"type": "category", "hasOnlyFieldTargets": "yes"}, "must be a boolean"),
        (["category"], "must be an object"),
    ],
)
def test_parameter_from_dict_rejects_malformed_payloads(payload, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parameter_from_dict(payload)


@pytest.mark.parametrize("remapping", [[[1]], 5, "ab", [[1, "a", "b"]], [[[1], "a"]]])
def test_field_from_dict_rejects_malformed_remapping(remapping) -> None:
    with pytest.raises(ValueError, match="remapping"):
        field_from_dict({"base_type": "type/Integer", "remapping": remapping})
