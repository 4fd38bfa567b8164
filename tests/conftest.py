import sys
import random
import pytest
from pathlib import Path

# Ensure project root is importable for test modules
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class ZeroRandom:
    """Random source that always picks the first candidate."""

    def randrange(self, n):
        if n <= 0:
            raise ValueError("empty range for randrange")
        return 0

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def zero_rng():
    return ZeroRandom()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
