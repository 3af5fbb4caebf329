"""
Word types and metadata.
"""

import pytest

from granny.errors import EmptyInputError
from granny.words import Metadata, Side, Type, derive_metadata, derive_type

WORDS = ["granny", "panties", "zack", "miri", "sweater", "qwerty1", "ab", "0800"]


def test_derive_type():
    assert derive_type("granny") == Type(first_key='G', last_key='Y', length=6)
    assert derive_type("panties") == Type(first_key='P', last_key='S', length=7)


def test_derive_metadata():
    assert derive_metadata("granny") == Metadata(t=Type('G', 'Y', 6), cost=14)
    assert derive_metadata("panties") == Metadata(t=Type('P', 'S', 7), cost=29)


@pytest.mark.parametrize("word", WORDS)
def test_metadata_properties(word):
    metadata = derive_metadata(word)
    assert metadata.cost >= 0
    assert metadata.t.length == len(word)


def test_empty_word():
    with pytest.raises(EmptyInputError):
        derive_type("")
    with pytest.raises(EmptyInputError):
        derive_metadata("")


def test_types_are_hashable():
    types = {derive_type("granny"), derive_type("grassy"), derive_type("panties")}
    assert len(types) == 2


def test_bound():
    t = derive_type("granny")
    assert t.bound(Side.LEFT) == Type(first_key=None, last_key='Y', length=6)
    assert t.bound(Side.RIGHT) == Type(first_key='G', last_key=None, length=6)
    # the original is left untouched
    assert t == Type('G', 'Y', 6)


def test_unconstrained_key_never_matches_a_real_key():
    left = derive_type("granny").bound(Side.LEFT)
    assert left != derive_type("granny")
    assert left.first_key is None
