"""Types used with mypy for decoded DynamoDB items and attributes.

.. warning::
    No guarantee is provided on the modules and APIs within this
    namespace staying consistent. Directly reference at your own risk.
"""
# constant naming for types so pylint: disable=invalid-name
from decimal import Decimal
from typing import Any, Dict, List, Optional, Text, Union

from boto3.dynamodb.types import Binary

STRING = Text
NUMBER = Decimal  # DYNAMODB_CONTEXT decimals, as boto3 TypeDeserializer returns
BOOLEAN = bool
BINARY = Union[bytes, bytearray, Binary]
NULL = None
SET = List  # sets are returned as lists, in response order
DECODED_VALUE = Optional[Union[STRING, NUMBER, BOOLEAN, BINARY, List[Any], Dict[Text, Any]]]
MAP = Dict[Text, DECODED_VALUE]
LIST = List[DECODED_VALUE]
ITEM = MAP
