"""Tests for the scan state primitives."""

import pytest
from megophone.core.context import WordContext
from megophone.core.scan_state import ScanState


def make_state(word, cursor=0, padding=5):
    return ScanState(
        text=word + ' ' * padding,
        context=WordContext.from_word(word),
        cursor=cursor
    )


class TestMatches:
    """Tests for the lookahead matcher."""

    def test_no_candidates_always_true(self):
        state = make_state('abc')
        assert state.matches(0)
        assert state.matches(-5)

    def test_match_at_cursor(self):
        state = make_state('chia')
        assert state.matches(0, 'ch')
        assert state.matches(0, 'xx', 'chi')
        assert not state.matches(0, 'ca')

    def test_relative_offsets(self):
        state = make_state('hello', cursor=2)
        assert state.matches(-1, 'el')
        assert state.matches(1, 'lo')
        assert state.matches(-2, 'hello')

    def test_negative_position_is_false(self):
        """Test that windows starting before the text never match."""
        state = make_state('hello', cursor=1)
        assert not state.matches(-2, 'h')
        assert not state.matches(-2, '', 'xh')

    def test_window_past_end_is_false(self):
        """Test that windows running past the padding never match."""
        state = make_state('ab', padding=2)
        assert state.matches(2, '  ')
        assert not state.matches(3, '  ')
        assert not state.matches(0, 'ab      ')

    def test_anchor_at_word_start(self):
        state = make_state('mchugh', cursor=1)
        assert state.matches(-state.cursor, 'mc')

    def test_case_sensitive(self):
        state = make_state('Bach')
        assert not state.matches(0, 'b')
        assert state.matches(0, 'B')


class TestIsVowel:
    """Tests for the vowel predicate."""

    def test_lowercase_vowels(self):
        for vowel in 'aeiouy':
            assert make_state(vowel).is_vowel(0)

    def test_consonants(self):
        for letter in 'bcdxz ':
            assert not make_state(letter).is_vowel(0)

    def test_uppercase_is_not_vowel(self):
        assert not make_state('A').is_vowel(0)

    def test_offset(self):
        state = make_state('bat', cursor=2)
        assert state.is_vowel(-1)
        assert not state.is_vowel(-2)
        assert not state.is_vowel(-3)


class TestAdd:
    """Tests for the code emitter."""

    def test_no_arguments_is_noop(self):
        state = make_state('a')
        state.add()
        assert state.codes() == ('', '')

    def test_single_fragment_goes_to_both(self):
        state = make_state('a')
        state.add('k')
        state.add('s')
        assert state.codes() == ('ks', 'ks')

    def test_two_fragments_split(self):
        state = make_state('a')
        state.add('x', 'k')
        assert state.codes() == ('x', 'k')

    def test_emission_count_parity(self):
        state = make_state('a')
        state.add('x', 'k')
        state.add('p')
        assert len(state.primary) == len(state.secondary) == 2


class TestSkip:
    """Tests for the cursor controller."""

    def test_skip_advances(self):
        state = make_state('abc')
        state.skip(2)
        assert state.cursor == 2
        assert state.current == 'c'

    def test_skip_zero(self):
        state = make_state('abc', cursor=1)
        state.skip(0)
        assert state.cursor == 1

    def test_negative_skip_rejected(self):
        state = make_state('abc', cursor=2)
        with pytest.raises(ValueError):
            state.skip(-1)
        assert state.cursor == 2

    def test_exhausted(self):
        state = make_state('ab', padding=0)
        assert not state.exhausted
        state.skip(2)
        assert state.exhausted


class TestWordContext:
    """Tests for the whole-word pre-pass."""

    def test_slavo_germanic_markers(self):
        assert WordContext.from_word('kowalski').is_slavo_germanic
        assert WordContext.from_word('czerny').is_slavo_germanic
        assert WordContext.from_word('horowitz').is_slavo_germanic

    def test_not_slavo_germanic(self):
        assert not WordContext.from_word('smith').is_slavo_germanic
        assert not WordContext.from_word('').is_slavo_germanic

    def test_immutable(self):
        context = WordContext.from_word('smith')
        with pytest.raises(Exception):
            context.is_slavo_germanic = True
