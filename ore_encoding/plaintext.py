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

from dataclasses import dataclass, field

from ore_encoding.domain import IntDomain, Uint64Domain


@dataclass(frozen=True, slots=True, order=True)
class OrePlaintext:
    """ Order-preserving representation of a value, ready to be handed to an ORE engine.

    Only `value` takes part in equality, hashing and ordering. `domain` records the unsigned width the value lives
    in, the encoders always produce `Uint64Domain` plaintexts.

    >>> OrePlaintext(1) < OrePlaintext(2)
    True
    >>> int(OrePlaintext(42))
    42
    """

    value: int
    domain: type[IntDomain] = field(default=Uint64Domain, compare=False)

    def __post_init__(self) -> None:
        self.domain.check_range(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        if self.domain is Uint64Domain:
            return f'OrePlaintext({self.value})'
        return f'OrePlaintext({self.value}, {self.domain.__name__})'
