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

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DomainName = Literal['u8', 'u16', 'u32', 'u64']


class OreEncodingSettings(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    # Integer domain of the plaintexts given to `range` when no --domain is passed
    DEFAULT_RANGE_DOMAIN: DomainName = 'u64'

    # How many times each benchmark of the `bench` command calls the measured function
    BENCH_ITERATIONS: int = Field(default=100_000, gt=0)

    # Inputs of the f64 encoding and the hashing benchmarks
    BENCH_FLOAT_SAMPLE: float = 123.4567
    BENCH_HASH_SAMPLE: str = 'The quick brown fox jumped over the lazy dogs'
