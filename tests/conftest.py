import sys
from pathlib import Path

import pytest

# Ensure project root on path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from granny.passwords import Password, Passwords


@pytest.fixture
def make_table():
    def _make(words):
        table = Passwords()
        for word in words:
            table.push(Password.from_word(word))
        return table
    return _make
