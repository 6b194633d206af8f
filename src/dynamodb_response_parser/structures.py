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
"""Typed DynamoDB response structures consumed by :class:`ResponseParser`.

Field names mirror the keys used in DynamoDB API responses.
"""
# field names follow the DynamoDB API so pylint: disable=invalid-name
import attr
from boto3.dynamodb.types import Binary

from dynamodb_response_parser.internal.validators import dictionary_validator, iterable_validator

__all__ = (
    "AttributeValue",
    "AttributeMap",
    "GetItemOutput",
    "ScanOutput",
    "QueryOutput",
    "BatchGetItemOutput",
)

_BINARY_TYPES = (bytes, bytearray, Binary)


def _optional(validator):
    return attr.validators.optional(validator)


def _attribute_value_or_none():
    return (AttributeValue, type(None))


def _attribute_map_or_none():
    return (AttributeMap, type(None))


@attr.s
class AttributeValue(object):
    # pylint: disable=too-few-public-methods,too-many-instance-attributes
    """A single DynamoDB attribute value.

    Exactly one field is expected to be populated, but this is not enforced: when more
    than one is, the first one in ``S``, ``N``, ``BOOL``, ``NULL``, ``B``, ``M``, ``L``,
    ``SS``, ``NS``, ``BS`` order is used.

    >>> from dynamodb_response_parser.structures import AttributeValue
    >>> AttributeValue(M={'count': AttributeValue(N='3'), 'tags': AttributeValue(SS=['a', 'b'])})

    :param str S: String value
    :param str N: Number value, as a decimal string
    :param bool BOOL: Boolean value
    :param bool NULL: Null marker
    :param bytes B: Binary value
    :param dict M: Map of names to nested :class:`AttributeValue`
    :param list L: List of nested :class:`AttributeValue`
    :param list SS: String set values
    :param list NS: Number set values, as decimal strings
    :param list BS: Binary set values
    """

    S = attr.ib(default=None, validator=_optional(attr.validators.instance_of(str)))
    N = attr.ib(default=None, validator=_optional(attr.validators.instance_of(str)))
    BOOL = attr.ib(default=None, validator=_optional(attr.validators.instance_of(bool)))
    NULL = attr.ib(default=None, validator=_optional(attr.validators.instance_of(bool)))
    B = attr.ib(default=None, validator=_optional(attr.validators.instance_of(_BINARY_TYPES)))
    M = attr.ib(default=None, validator=_optional(dictionary_validator(str, _attribute_value_or_none)))
    L = attr.ib(default=None, validator=_optional(iterable_validator(list, _attribute_value_or_none)))
    SS = attr.ib(default=None, validator=_optional(iterable_validator(list, str)))
    NS = attr.ib(default=None, validator=_optional(iterable_validator(list, str)))
    BS = attr.ib(default=None, validator=_optional(iterable_validator(list, _BINARY_TYPES)))


@attr.s
class AttributeMap(object):
    # pylint: disable=too-few-public-methods
    """A DynamoDB item: attribute names mapped to :class:`AttributeValue`.

    :param dict Map: Attribute values keyed by attribute name
    """

    Map = attr.ib(
        default=attr.Factory(dict), validator=dictionary_validator(str, _attribute_value_or_none)
    )


@attr.s
class GetItemOutput(object):
    # pylint: disable=too-few-public-methods
    """Response from a ``GetItem`` call.

    :param AttributeMap Item: Requested item, if it was found
    """

    Item = attr.ib(default=None, validator=_optional(attr.validators.instance_of(AttributeMap)))


@attr.s
class ScanOutput(object):
    # pylint: disable=too-few-public-methods
    """Response from a ``Scan`` call.

    :param list Items: Items returned by the scan
    """

    Items = attr.ib(default=None, validator=_optional(iterable_validator(list, _attribute_map_or_none)))


@attr.s
class QueryOutput(object):
    # pylint: disable=too-few-public-methods
    """Response from a ``Query`` call.

    :param list Items: Items returned by the query
    """

    Items = attr.ib(default=None, validator=_optional(iterable_validator(list, _attribute_map_or_none)))


@attr.s
class BatchGetItemOutput(object):
    # pylint: disable=too-few-public-methods
    """Response from a ``BatchGetItem`` call.

    :param dict Responses: Lists of items keyed by the name of the table they were read from
    """

    Responses = attr.ib(default=None, validator=_optional(dictionary_validator(str)))
