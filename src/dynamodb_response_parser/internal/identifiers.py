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
"""Unique identifiers for internal use only.

.. warning::
    No guarantee is provided on the modules and APIs within this
    namespace staying consistent. Directly reference at your own risk.
"""
from enum import Enum

__all__ = ("Tag",)


class Tag(Enum):
    """DynamoDB attribute data type identifiers used when decoding attribute values.

    .. note::

        Members are declared in decoding priority order. If an attribute value has
        more than one data type field populated, the first member found wins.
    """

    STRING = "S"
    NUMBER = "N"
    BOOLEAN = "BOOL"
    NULL = "NULL"
    BINARY = "B"
    MAP = "M"
    LIST = "L"
    STRING_SET = "SS"
    NUMBER_SET = "NS"
    BINARY_SET = "BS"
