import random
import string

import pytest

from shortlinks.exceptions import AllocatorExhausted, InvalidShortcodeFormat, ShortcodeCollision
from shortlinks.utils.short_code import ShortCodeGenerator
from tests.conftest import ScriptedRandom


def never_taken(code):
    return False


# -------------------------------
# Random generation
# -------------------------------

def test_generate_random_is_base62_of_requested_length():
    code = ShortCodeGenerator.generate_random(6, random.Random(7))
    alphabet = set(string.ascii_letters + string.digits)
    assert len(code) == 6
    assert all(c in alphabet for c in code)


def test_generate_random_is_reproducible_with_seed():
    first = ShortCodeGenerator.generate_random(6, random.Random(99))
    second = ShortCodeGenerator.generate_random(6, random.Random(99))
    assert first == second


def test_charset_has_62_symbols():
    assert len(set(ShortCodeGenerator.CHARSET)) == 62


# -------------------------------
# Custom code validation
# -------------------------------

@pytest.mark.parametrize('code', ['abc', 'ABC123', 'a1B2c3D4e5', '000'])
def test_valid_custom_codes(code):
    assert ShortCodeGenerator.is_valid_custom_code(code)


@pytest.mark.parametrize('code', ['ab', 'abcdefghijk', 'ab-c', 'ab_c', 'abc!', 'ab c', 'ñandu', '', None, 123])
def test_invalid_custom_codes(code):
    assert not ShortCodeGenerator.is_valid_custom_code(code)


# -------------------------------
# Allocation
# -------------------------------

def test_allocate_returns_requested_code():
    assert ShortCodeGenerator.allocate('custom1', never_taken) == 'custom1'


def test_allocate_rejects_malformed_requested_code():
    with pytest.raises(InvalidShortcodeFormat):
        ShortCodeGenerator.allocate('ab', never_taken)


def test_allocate_rejects_taken_requested_code():
    with pytest.raises(ShortcodeCollision):
        ShortCodeGenerator.allocate('abc', lambda code: code == 'abc')


@pytest.mark.parametrize('requested', [None, ''])
def test_allocate_generates_when_no_code_requested(requested):
    code = ShortCodeGenerator.allocate(requested, never_taken, rng=random.Random(3))
    assert len(code) == 6


def test_allocate_retries_until_free_code():
    rng = ScriptedRandom(['taken1', 'taken2', 'free01'])
    taken = {'taken1', 'taken2'}
    code = ShortCodeGenerator.allocate(None, taken.__contains__, rng=rng)
    assert code == 'free01'
    assert rng.calls == 3


def test_allocate_gives_up_after_max_attempts():
    rng = ScriptedRandom(['taken1'])
    with pytest.raises(AllocatorExhausted):
        ShortCodeGenerator.allocate(None, lambda code: True, rng=rng, max_attempts=5)
    assert rng.calls == 5


# -------------------------------
# Reserved route names
# -------------------------------

def test_allocate_rejects_reserved_requested_code():
    with pytest.raises(ShortcodeCollision):
        ShortCodeGenerator.allocate('health', never_taken, reserved={'health'})


def test_allocate_skips_reserved_generated_code():
    rng = ScriptedRandom(['health', 'free01'])
    code = ShortCodeGenerator.allocate(None, never_taken, rng=rng, reserved={'health'})
    assert code == 'free01'
    assert rng.calls == 2
