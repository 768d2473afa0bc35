# Copyright 2026 The dotflat Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
'''
    Flattening of nested key-value structures into dot-joined keys.
'''
from collections.abc import Mapping, MutableMapping, Sequence
from enum import Enum
from typing import Any

DEFAULT_SEPARATOR = '.'


class ValueKind(Enum):
    MAPPING = 'mapping'
    SEQUENCE = 'sequence'
    LEAF = 'leaf'


def classify(value: Any) -> ValueKind:
    '''
        Classifies a value into exactly one kind

        Args: (any) value - value to classify
        Returns: (ValueKind) - MAPPING, SEQUENCE or LEAF
    '''
    if isinstance(value, Mapping):
        return ValueKind.MAPPING

    # Strings are sequences too, but they are plain values here
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return ValueKind.SEQUENCE

    return ValueKind.LEAF


def flatten(d: Mapping, prefix: str = '', accumulator: MutableMapping = None,
            sep: str = DEFAULT_SEPARATOR) -> MutableMapping:
    '''
        Recursively flattens a nested mapping into dot-joined keys.

        Only nested mappings are descended into. Lists, None and any other
        value are stored as they are, without copying. An empty nested
        mapping produces no key. Keys are not escaped, so when two paths
        render to the same key the one visited later wins.

        Cyclic input is not detected and ends in RecursionError.

        Args: (Mapping) d - mapping to flatten
              (str) prefix='' - path already traversed
              (MutableMapping) accumulator=None - mapping collecting results,
                                                  a new dict when omitted
              (str) sep='.' - separator in nested keys

        Returns: (MutableMapping) - the accumulator
    '''
    if accumulator is None:
        accumulator = {}

    if not isinstance(d, Mapping):
        return accumulator

    for k, v in d.items():
        new_key = f'{prefix}{sep}{k}' if prefix else k

        if classify(v) is ValueKind.MAPPING:
            flatten(v, new_key, accumulator, sep=sep)
        else:
            accumulator[new_key] = v

    return accumulator
