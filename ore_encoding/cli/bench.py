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

from argparse import ArgumentParser, Namespace
from timeit import timeit
from typing import Callable, NamedTuple

from structlog import get_logger

logger = get_logger()


class BenchResult(NamedTuple):
    name: str
    iterations: int
    total_seconds: float

    @property
    def ns_per_op(self) -> float:
        return self.total_seconds * 1e9 / self.iterations


def run_benchmark(name: str, func: Callable[[], object], iterations: int) -> BenchResult:
    total = timeit(func, number=iterations)
    result = BenchResult(name, iterations, total)
    logger.info('benchmark', name=name, iterations=iterations, ns_per_op=round(result.ns_per_op, 1))
    return result


def create_parser() -> ArgumentParser:
    from ore_encoding.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('--iterations', type=int, help='Calls per benchmark (defaults to BENCH_ITERATIONS)')
    return parser


def execute(args: Namespace) -> int:
    from ore_encoding.conf import get_global_settings
    from ore_encoding.encoding.float import encode_f64
    from ore_encoding.siphash import siphash

    settings = get_global_settings()
    iterations = args.iterations or settings.BENCH_ITERATIONS
    if iterations <= 0:
        print('iterations must be positive')
        return 1

    sample_float = settings.BENCH_FLOAT_SAMPLE
    sample_data = settings.BENCH_HASH_SAMPLE.encode('utf-8')
    results = [
        run_benchmark('encode_f64', lambda: encode_f64(sample_float), iterations),
        run_benchmark('siphash', lambda: siphash(sample_data), iterations),
    ]
    for result in results:
        print('{:<12} {:>10.1f} ns/op ({} iterations)'.format(result.name, result.ns_per_op, result.iterations))
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
