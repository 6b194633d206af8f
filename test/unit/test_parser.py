# Copyright 2018 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
# http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
"""Unit tests for ``dynamodb_response_parser.parser``."""
import decimal
from decimal import Decimal

import attr
import pytest
from boto3.dynamodb.types import Binary

from dynamodb_response_parser.exceptions import (
    DecodeError,
    InvalidNumberError,
    UnsupportedAttributeTypeError,
    UnsupportedResponseTypeError,
)
from dynamodb_response_parser.parser import ResponseParser
from dynamodb_response_parser.structures import AttributeMap, AttributeValue

pytestmark = [pytest.mark.unit, pytest.mark.local]


@pytest.fixture
def parser():
    return ResponseParser()


@pytest.mark.parametrize(
    "attribute, expected",
    (
        (AttributeValue(S="value"), "value"),
        (AttributeValue(S=""), ""),
        (AttributeValue(N="42"), 42),
        (AttributeValue(N="-3.14"), Decimal("-3.14")),
        (AttributeValue(N="1E+3"), 1000),
        (AttributeValue(BOOL=True), True),
        (AttributeValue(BOOL=False), False),
        (AttributeValue(NULL=True), None),
        (AttributeValue(NULL=False), None),
        (AttributeValue(B=b"\x00\x01\x02"), b"\x00\x01\x02"),
        (AttributeValue(B=Binary(b"\x00\x01")), Binary(b"\x00\x01")),
        (AttributeValue(M={}), {}),
        (AttributeValue(M={"a": AttributeValue(S="x")}), {"a": "x"}),
        (AttributeValue(L=[]), []),
        (AttributeValue(L=[AttributeValue(S="x"), AttributeValue(BOOL=True)]), ["x", True]),
        (AttributeValue(SS=["b", "a", "b"]), ["b", "a", "b"]),
        (AttributeValue(SS=[]), []),
        (AttributeValue(NS=["1", "2.5", "-7"]), [1, Decimal("2.5"), -7]),
        (AttributeValue(BS=[b"\x01", b"\x00"]), [b"\x01", b"\x00"]),
    ),
)
def test_decode_attribute(parser, attribute, expected):
    actual = parser._decode_attribute(attribute)

    assert actual == expected


@pytest.mark.parametrize(
    "attribute",
    (AttributeValue(N="42"), AttributeValue(N="0.5"), AttributeValue(NS=["1", "2"])),
)
def test_decode_numbers_are_decimals(parser, attribute):
    actual = parser._decode_attribute(attribute)

    if isinstance(actual, list):
        assert all(isinstance(member, Decimal) for member in actual)
    else:
        assert isinstance(actual, Decimal)


@pytest.mark.parametrize("field, values", (("SS", ["z", "a"]), ("BS", [b"\x01", b"\x00"])))
def test_decode_set_does_not_share_input(parser, field, values):
    attribute = AttributeValue(**{field: values})

    decoded = parser._decode_attribute(attribute)
    decoded.append(decoded[0])

    assert decoded is not values
    assert getattr(attribute, field) == values
    assert len(values) == 2


@pytest.mark.parametrize(
    "attribute, expected",
    (
        (AttributeValue(S="s", N="1"), "s"),
        (AttributeValue(N="2", BOOL=True), Decimal("2")),
        (AttributeValue(BOOL=False, NULL=True), False),
        (AttributeValue(NULL=True, B=b"x"), None),
        (AttributeValue(B=b"x", M={}), b"x"),
        (AttributeValue(M={"a": AttributeValue(S="x")}, L=[]), {"a": "x"}),
        (AttributeValue(L=[AttributeValue(N="1")], SS=["a"]), [1]),
        (AttributeValue(SS=["a"], NS=["1"]), ["a"]),
        (AttributeValue(NS=["1"], BS=[b"a"]), [1]),
        (AttributeValue(S="", N="1", BOOL=True, NULL=True, B=b"x", SS=["a"]), ""),
    ),
)
def test_decode_attribute_priority(parser, attribute, expected):
    actual = parser._decode_attribute(attribute)

    assert actual == expected
    assert type(actual) is type(expected)


def test_decode_attribute_nested(parser):
    attribute = AttributeValue(
        M={
            "a": AttributeValue(N="1"),
            "b": AttributeValue(L=[AttributeValue(S="x"), AttributeValue(N="2")]),
        }
    )

    assert parser._decode_attribute(attribute) == {"a": 1, "b": ["x", 2]}


@pytest.mark.parametrize(
    "attribute, expected",
    (
        (None, None),
        ("S", None),
        ({"S": "value"}, None),
        (AttributeMap(), None),
        (AttributeValue(M={"a": None}), {"a": None}),
        (AttributeValue(L=[None, AttributeValue(S="x")]), [None, "x"]),
    ),
)
def test_decode_attribute_not_an_attribute_value(parser, attribute, expected):
    assert parser._decode_attribute(attribute) == expected


@pytest.mark.parametrize(
    "attribute",
    (
        AttributeValue(),
        AttributeValue(M={"a": AttributeValue()}),
        AttributeValue(L=[AttributeValue(S="x"), AttributeValue()]),
    ),
)
def test_decode_attribute_unsupported_type(parser, attribute):
    with pytest.raises(UnsupportedAttributeTypeError) as excinfo:
        parser._decode_attribute(attribute)

    excinfo.match(r"Unsupported attribute type: AttributeValue\(S=None, N=None, *")


@pytest.mark.parametrize(
    "attribute",
    (
        AttributeValue(N="not a number"),
        AttributeValue(N=""),
        AttributeValue(N="NaN"),
        AttributeValue(N="Infinity"),
        AttributeValue(N="9" * 39),
        AttributeValue(NS=["1", "nope"]),
    ),
)
def test_decode_attribute_invalid_number(parser, attribute):
    with pytest.raises(InvalidNumberError) as excinfo:
        parser._decode_attribute(attribute)

    excinfo.match(r"Invalid number value: *")
    assert isinstance(excinfo.value, DecodeError)


def test_decode_attribute_number_out_of_context(parser):
    with pytest.raises(InvalidNumberError) as excinfo:
        parser._decode_attribute(AttributeValue(N="1" * 39))

    assert isinstance(excinfo.value.__cause__, decimal.DecimalException)


@pytest.mark.parametrize(
    "item, expected",
    (
        (AttributeMap(), {}),
        (AttributeMap(Map={}), {}),
        (
            AttributeMap(Map={"id": AttributeValue(S="abc"), "count": AttributeValue(N="3")}),
            {"id": "abc", "count": 3},
        ),
        (AttributeMap(Map={"missing": None}), {"missing": None}),
        (None, None),
        ({"id": AttributeValue(S="abc")}, None),
        (AttributeValue(S="abc"), None),
    ),
)
def test_decode_item(parser, item, expected):
    assert parser._decode_item(item) == expected


@pytest.mark.parametrize("response", (None, {"Item": {}}, "GetItemOutput", 5, [AttributeMap()]))
def test_decode_invalid_response_object(parser, response):
    with pytest.raises(UnsupportedResponseTypeError) as excinfo:
        parser.decode(response)

    excinfo.match(r"^Invalid response object$")


@attr.s
class PutItemOutput(object):
    Attributes = attr.ib(default=None)


@pytest.mark.parametrize(
    "response, type_name",
    ((PutItemOutput(), "PutItemOutput"), (AttributeMap(), "AttributeMap"), (AttributeValue(S="x"), "AttributeValue")),
)
def test_decode_unsupported_response_type(parser, response, type_name):
    with pytest.raises(UnsupportedResponseTypeError) as excinfo:
        parser.decode(response)

    excinfo.match(r"^Unsupported response type: {}$".format(type_name))
