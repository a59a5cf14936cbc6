#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

import math
from typing import Iterable

from structlog import get_logger

from ore_encoding.encoding.float import encode_f64
from ore_encoding.plaintext import OrePlaintext

logger = get_logger()


def is_orderable(value: float) -> bool:
    """ Whether the plaintext of `value` has a well-defined position, which is everything but NaN.

    >>> is_orderable(float('inf')), is_orderable(float('nan'))
    (True, False)
    """
    return not math.isnan(value)


def filter_orderable(values: Iterable[float]) -> list[float]:
    """ Drop the NaNs from `values`, keeping the order of the rest.
    """
    kept: list[float] = []
    dropped = 0
    for value in values:
        if is_orderable(value):
            kept.append(value)
        else:
            dropped += 1
    if dropped:
        logger.debug('dropped values without a defined order', dropped=dropped, kept=len(kept))
    return kept


def encode_floats(values: Iterable[float], *, drop_nan: bool = True) -> list[OrePlaintext]:
    """ Encode a sequence of 64-bit floats.

    With `drop_nan=False` NaNs are encoded too, and the order of the result is then not meaningful.

    >>> encode_floats([2.0, float('nan'), -1.0]) == [encode_f64(2.0), encode_f64(-1.0)]
    True
    """
    if drop_nan:
        values = filter_orderable(values)
    return [encode_f64(value) for value in values]
