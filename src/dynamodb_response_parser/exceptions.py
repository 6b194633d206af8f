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


class DynamodbResponseParserError(Exception):
    """Base class for all custom exceptions."""


class UnsupportedResponseTypeError(DynamodbResponseParserError):
    """Raised when a response object is not one of the supported response types."""


class DecodeError(DynamodbResponseParserError):
    """Otherwise undifferentiated errors encountered while decoding attribute values."""


class UnsupportedAttributeTypeError(DecodeError):
    """Raised when an attribute value has none of the known data type fields populated."""


class InvalidNumberError(DecodeError):
    """Raised when a number value is not a valid DynamoDB number."""
