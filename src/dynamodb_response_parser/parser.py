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
"""Conversion of typed DynamoDB responses to native Python data structures."""
import decimal
import logging
from typing import Any, Callable, Dict, List, Optional, Union  # noqa pylint: disable=unused-import

import attr
from boto3.dynamodb.types import DYNAMODB_CONTEXT

from dynamodb_response_parser.exceptions import (
    InvalidNumberError,
    UnsupportedAttributeTypeError,
    UnsupportedResponseTypeError,
)
from dynamodb_response_parser.identifiers import LOGGER_NAME
from dynamodb_response_parser.internal import dynamodb_types  # noqa pylint: disable=unused-import
from dynamodb_response_parser.internal.identifiers import Tag
from dynamodb_response_parser.structures import (
    AttributeMap,
    AttributeValue,
    BatchGetItemOutput,
    GetItemOutput,
    QueryOutput,
    ScanOutput,
)

__all__ = ("ResponseParser",)
_LOGGER = logging.getLogger(LOGGER_NAME)


@attr.s
class ResponseParser(object):
    """Converts typed DynamoDB response objects to native Python data structures.

    >>> from dynamodb_response_parser import ResponseParser
    >>> from dynamodb_response_parser.structures import AttributeMap, AttributeValue, ScanOutput
    >>> parser = ResponseParser()
    >>> parser.decode(ScanOutput(Items=[AttributeMap(Map={'id': AttributeValue(N='1')})]))
    [{'id': Decimal('1')}]

    Supported response types:

    * :class:`GetItemOutput`: returns the decoded item, or ``None`` if no item was found
    * :class:`ScanOutput` and :class:`QueryOutput`: returns a list of decoded items
    * :class:`BatchGetItemOutput`: returns a single list of the decoded items from all tables

    .. note::

        Numbers are returned as :class:`decimal.Decimal` values, matching
        :class:`boto3.dynamodb.types.TypeDeserializer`. String, number, and binary sets are
        returned as lists in the order they appear in the response.

    The parser holds no state and may be shared freely.
    """

    def decode(self, response):
        # type: (Any) -> Union[Optional[dynamodb_types.ITEM], List[Optional[dynamodb_types.ITEM]]]
        """Convert a typed DynamoDB response to native Python data structures.

        :param response: Typed DynamoDB response
        :returns: Decoded item, or list of decoded items
        :raises UnsupportedResponseTypeError: if ``response`` is not a supported response type
        :raises DecodeError: if any attribute value cannot be decoded
        """
        if not attr.has(type(response)):
            raise UnsupportedResponseTypeError("Invalid response object")

        if isinstance(response, GetItemOutput):
            _LOGGER.debug("Decoding GetItem response")
            return self._decode_item(response.Item) if response.Item is not None else None

        if isinstance(response, (ScanOutput, QueryOutput)):
            items = response.Items or []
            _LOGGER.debug("Decoding %s response with %d items", type(response).__name__, len(items))
            return [self._decode_item(item) for item in items]

        if isinstance(response, BatchGetItemOutput):
            return self._decode_batch_response(response)

        raise UnsupportedResponseTypeError("Unsupported response type: {}".format(type(response).__name__))

    def _decode_batch_response(self, response):
        # type: (BatchGetItemOutput) -> List[Optional[dynamodb_types.ITEM]]
        """Flatten the items from all tables in a batch response into a single list.

        Table entries that do not hold a list of items are skipped.

        :param BatchGetItemOutput response: Batch response
        :rtype: list
        """
        all_items = []  # type: List[Optional[dynamodb_types.ITEM]]
        if not response.Responses:
            _LOGGER.debug("Decoding BatchGetItem response with no tables")
            return all_items

        for table_name, table_items in response.Responses.items():
            if not isinstance(table_items, list):
                _LOGGER.debug('Skipping table "%s": items are not a list', table_name)
                continue

            _LOGGER.debug('Decoding %d items from table "%s"', len(table_items), table_name)
            all_items.extend(self._decode_item(item) for item in table_items)

        return all_items

    def _decode_item(self, item):
        # type: (Any) -> Optional[dynamodb_types.ITEM]
        """Decode every attribute of an item.

        :param AttributeMap item: Typed item
        :returns: Decoded item, or ``None`` if ``item`` is not an :class:`AttributeMap`
        :rtype: dict
        """
        if not isinstance(item, AttributeMap):
            return None

        return {name: self._decode_attribute(value) for name, value in item.Map.items()}

    def _decode_attribute(self, attribute):
        # type: (Any) -> dynamodb_types.DECODED_VALUE
        """Decode a single attribute value.

        :param AttributeValue attribute: Typed attribute value
        :returns: Decoded value, or ``None`` if ``attribute`` is not an :class:`AttributeValue`
        :raises UnsupportedAttributeTypeError: if no data type field is populated
        :raises InvalidNumberError: if a number value is not a valid DynamoDB number
        """
        if not isinstance(attribute, AttributeValue):
            return None

        for tag in Tag:
            value = getattr(attribute, tag.value)
            if value is not None:
                return self._decode_function(tag)(value)

        raise UnsupportedAttributeTypeError("Unsupported attribute type: {!r}".format(attribute))

    def _decode_function(self, tag):
        # type: (Tag) -> Callable
        """Identify the correct decode function for the provided tag.

        :param Tag tag: Populated data type
        :rtype: callable
        """
        decode_functions = {
            Tag.STRING: _decode_verbatim,
            Tag.NUMBER: _decode_number,
            Tag.BOOLEAN: _decode_verbatim,
            Tag.NULL: _decode_null,
            Tag.BINARY: _decode_verbatim,
            Tag.MAP: self._decode_map,
            Tag.LIST: self._decode_list,
            Tag.STRING_SET: list,
            Tag.NUMBER_SET: _decode_number_set,
            Tag.BINARY_SET: list,
        }  # type: Dict[Tag, Callable]
        return decode_functions[tag]

    def _decode_map(self, value):
        # type: (Dict[str, AttributeValue]) -> dynamodb_types.MAP
        """Decode the members of a map attribute."""
        return {key: self._decode_attribute(member) for key, member in value.items()}

    def _decode_list(self, value):
        # type: (List[AttributeValue]) -> dynamodb_types.LIST
        """Decode the members of a list attribute."""
        return [self._decode_attribute(member) for member in value]


def _decode_verbatim(value):
    return value


def _decode_null(value):  # we want a consistent API but don't use value, so pylint: disable=unused-argument
    # type: (bool) -> None
    """Null attributes always decode to ``None``, whatever the marker value."""
    return None


def _decode_number(value):
    # type: (str) -> dynamodb_types.NUMBER
    """Convert a DynamoDB number string to a :class:`decimal.Decimal`.

    :param str value: Number as a decimal string
    :rtype: decimal.Decimal
    :raises InvalidNumberError: if ``value`` is not a valid DynamoDB number
    """
    try:
        number = DYNAMODB_CONTEXT.create_decimal(value)
    except decimal.DecimalException as error:
        raise InvalidNumberError('Invalid number value: "{}"'.format(value)) from error

    # DYNAMODB_CONTEXT does not trap InvalidOperation, so malformed strings come back as NaN
    if not number.is_finite():
        raise InvalidNumberError('Invalid number value: "{}"'.format(value))

    return number


def _decode_number_set(value):
    # type: (List[str]) -> dynamodb_types.SET[dynamodb_types.NUMBER]
    return [_decode_number(member) for member in value]
