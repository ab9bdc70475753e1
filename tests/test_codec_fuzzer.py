"""
Property-based fuzzing for the codec, traversals and numbering.

Run with: pytest tests/test_codec_fuzzer.py --hypothesis-show-statistics -v

Properties:
1. Round-trip: restructure(destructure(s)) == s
2. Bracket balance: streams start with OPEN, end with CLOSE, never dip
   below zero
3. Atom counts survive the round trip
4. The accumulator encoder emits the same stream as the naive one
5. Numbering preserves shape and visits atoms left to right
6. rightmost / deepest_atom agree with a flattened reading
"""

import pytest

# Skip all tests if hypothesis is not installed
hypothesis = pytest.importorskip("hypothesis", reason="hypothesis required for fuzzer tests")

from hypothesis import given, settings, strategies as st

from nestseq import (
    Seq, OPEN, CLOSE, EMPTY,
    destructure, restructure, is_well_formed,
    rightmost, deepest_atom, deepest_atom_search,
    sequence_atoms, count_atoms, nesting_depth, Tagged,
)

from strategies import nested_seqs
from reference import naive_destructure


def _atoms_with_depth(s, depth=0):
    out = []
    for elem in s:
        if isinstance(elem, Seq):
            out.extend(_atoms_with_depth(elem, depth + 1))
        else:
            out.append((elem, depth))
    return out


def _same_shape(a, b):
    if isinstance(a, Seq) != isinstance(b, Seq):
        return False
    if not isinstance(a, Seq):
        return True
    xs, ys = list(a), list(b)
    return len(xs) == len(ys) and all(_same_shape(x, y) for x, y in zip(xs, ys))


class TestCodecProperties:

    @given(nested_seqs())
    @settings(max_examples=300)
    def test_roundtrip(self, s):
        """restructure(destructure(s)) == s"""
        assert restructure(destructure(s)) == s

    @given(nested_seqs())
    @settings(max_examples=200)
    def test_balanced(self, s):
        """Streams are one balanced group."""
        tokens = list(destructure(s))
        assert tokens[0] is OPEN
        assert tokens[-1] is CLOSE
        balance = 0
        for token in tokens:
            if token is OPEN:
                balance += 1
            elif token is CLOSE:
                balance -= 1
            assert balance >= 0
        assert balance == 0
        assert is_well_formed(destructure(s))

    @given(nested_seqs())
    @settings(max_examples=200)
    def test_atom_count_invariant(self, s):
        out = restructure(destructure(s))
        assert count_atoms(out) == count_atoms(s)
        assert nesting_depth(out) == nesting_depth(s)

    @given(nested_seqs())
    @settings(max_examples=200)
    def test_matches_naive_encoder(self, s):
        assert list(destructure(s)) == naive_destructure(s)

    @given(nested_seqs(), st.integers(min_value=1, max_value=20))
    @settings(max_examples=200)
    def test_truncated_stream_is_rejected(self, s, cut):
        """Dropping tokens from the end never yields a silent result."""
        tokens = list(destructure(s))
        cut = min(cut, len(tokens))
        truncated = Seq.from_iterable(tokens[:-cut])
        assert not is_well_formed(truncated)
        with pytest.raises(ValueError):
            restructure(truncated)


class TestTraversalProperties:

    @given(nested_seqs())
    @settings(max_examples=200)
    def test_rightmost_is_last_atom(self, s):
        atoms = _atoms_with_depth(s)
        expected = atoms[-1][0] if atoms else EMPTY
        found = rightmost(s)
        if expected is EMPTY:
            assert found is EMPTY
        else:
            assert found == expected

    @given(nested_seqs())
    @settings(max_examples=200)
    def test_deepest_is_leftmost_max(self, s):
        atoms = _atoms_with_depth(s)
        if not atoms:
            assert deepest_atom_search(s) == (EMPTY, -1)
            return
        max_depth = max(d for _, d in atoms)
        expected = next(a for a, d in atoms if d == max_depth)
        atom, depth = deepest_atom_search(s)
        assert depth == max_depth
        assert atom == expected
        assert deepest_atom(s) == expected


class TestNumberingProperties:

    @given(nested_seqs(), st.integers(-100, 100), st.integers(-10, 10))
    @settings(max_examples=200)
    def test_shape_and_indices(self, s, initial, increment):
        out = sequence_atoms(s, initial, increment)
        assert _same_shape(s, out)
        tagged = [a for a, _ in _atoms_with_depth(out)]
        originals = [a for a, _ in _atoms_with_depth(s)]
        assert all(isinstance(t, Tagged) for t in tagged)
        assert [t.atom for t in tagged] == originals
        assert [t.index for t in tagged] == [
            initial + k * increment for k in range(len(originals))
        ]
