import secrets
import unittest
from random import Random
from typing import Optional

from structlog import get_logger

from ore_encoding.conf import get_global_settings
from ore_encoding.encoding.float import bits_to_float

logger = get_logger()
main = unittest.main


class TestCase(unittest.TestCase):
    seed_config: Optional[int] = None

    def setUp(self) -> None:
        self.log = logger.new()
        self.seed = secrets.randbits(64) if self.seed_config is None else self.seed_config
        self.log.info('set seed', seed=self.seed)
        self.rng = Random(self.seed)
        self._settings = get_global_settings()

    def random_u64(self) -> int:
        return self.rng.getrandbits(64)

    def random_float(self) -> float:
        """ A float drawn uniformly over bit patterns, so every exponent is as likely as any other. NaN excluded.
        """
        while True:
            value = bits_to_float(self.rng.getrandbits(64))
            if value == value:
                return value
