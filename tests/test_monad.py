"""Tests for MonadDescriptor, Monoid and the map fallback."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from monadkit import (
    IDENTITY,
    LIST_MONOID,
    OPTION,
    READER,
    RESULT,
    STRING_MONOID,
    SUM_MONOID,
    WRITER,
    Err,
    MalformedDescriptor,
    MalformedDescriptorError,
    MonadDescriptor,
    Monoid,
    Nothing,
    Ok,
    Reader,
    Some,
    Writer,
    fmap,
    map_via_flat_map,
)
from tests.strategies import int_functions, monoid_samples, options, results, writers


class TestMonadDescriptor:
    """Tests for descriptor construction and validation."""

    def test_minimal_descriptor(self):
        """map is optional and defaults to None."""
        d = MonadDescriptor(of=lambda a: [a], flat_map=lambda m, f: [y for x in m for y in f(x)])
        assert d.map is None
        assert d.name == 'anonymous'

    @pytest.mark.parametrize('field', ['of', 'flat_map', 'map'])
    def test_non_callable_operation_rejected(self, field):
        """A non-callable operation raises MalformedDescriptorError."""
        ops = {'of': Some, 'flat_map': lambda m, f: m.flat_map(f), 'map': None}
        ops[field] = 42
        with pytest.raises(MalformedDescriptorError) as exc_info:
            MonadDescriptor(**ops, name='bad')
        assert exc_info.value.operation == field
        assert isinstance(exc_info.value, TypeError)

    def test_error_struct_roundtrip(self):
        """MalformedDescriptorError converts to and from its struct form."""
        err = MalformedDescriptorError('MonadDescriptor(x)', 'of')
        assert err.to_struct() == MalformedDescriptor('MonadDescriptor(x)', 'of')
        assert "operation 'of' must be callable" in str(err.to_struct().to_exception())

    def test_without_map(self):
        """without_map drops map and renames the descriptor."""
        bare = OPTION.without_map()
        assert bare.map is None
        assert bare.of is OPTION.of
        assert bare.name == 'Option[no-map]'

    def test_descriptor_is_frozen(self):
        """Descriptors are immutable."""
        with pytest.raises(AttributeError):
            IDENTITY.name = 'other'  # type: ignore[misc]


class TestBuiltinDescriptors:
    """Tests for the descriptors shipped with monadkit."""

    def test_identity(self):
        """IDENTITY wraps nothing."""
        assert IDENTITY.of(3) == 3
        assert IDENTITY.flat_map(3, lambda x: x + 1) == 4

    def test_option(self):
        """OPTION sequences Some and stops at Nothing."""
        assert OPTION.of(1) == Some(1)
        assert OPTION.flat_map(Nothing, lambda x: Some(x)) == Nothing

    def test_result(self):
        """RESULT sequences Ok and stops at Err."""
        assert RESULT.of(1) == Ok(1)
        assert RESULT.flat_map(Err('e'), Ok) == Err('e')

    def test_reader(self):
        """READER builds environment-ignoring readers."""
        assert READER.flat_map(READER.of(2), lambda x: Reader.asks(lambda e: x + e)).run(5) == 7

    def test_writer(self):
        """WRITER appends logs through flat_map."""
        assert WRITER.flat_map(Writer.of(1, 'a'), lambda x: Writer.of(x, 'b')).log == 'ab'


class TestFallbackEquivalence:
    """fmap behaves the same with or without a native map."""

    @given(options, int_functions)
    def test_option(self, m, f):
        """Option: native map equals map_via_flat_map."""
        assert fmap(OPTION, m, f) == fmap(OPTION.without_map(), m, f) == map_via_flat_map(OPTION, m, f)

    @given(results, int_functions)
    def test_result(self, m, f):
        """Result: native map equals map_via_flat_map."""
        assert fmap(RESULT, m, f) == fmap(RESULT.without_map(), m, f)

    @given(writers, int_functions)
    def test_writer(self, m, f):
        """Writer: native map equals map_via_flat_map."""
        assert fmap(WRITER, m, f) == fmap(WRITER.without_map(), m, f)

    @given(st.integers(), int_functions)
    def test_identity(self, x, f):
        """Identity: native map equals map_via_flat_map."""
        assert fmap(IDENTITY, x, f) == fmap(IDENTITY.without_map(), x, f) == f(x)

    def test_fmap_prefers_native_map(self):
        """fmap calls the descriptor's map when present."""
        calls = []

        def tracking_map(m, f):
            calls.append('map')
            return m.map(f)

        d = MonadDescriptor(of=Some, flat_map=lambda m, f: m.flat_map(f), map=tracking_map)
        assert fmap(d, Some(1), lambda x: x + 1) == Some(2)
        assert calls == ['map']


class TestMonoid:
    """Tests for Monoid and the built-in monoids."""

    def test_non_callable_concat_rejected(self):
        """A non-callable concat raises MalformedDescriptorError."""
        with pytest.raises(MalformedDescriptorError):
            Monoid(0, 'add', name='bad')

    def test_fold(self):
        """fold combines left to right from empty."""
        assert STRING_MONOID.fold(['a', 'b', 'c']) == 'abc'
        assert SUM_MONOID.fold([]) == 0

    def test_list_monoid_does_not_mutate(self):
        """LIST_MONOID builds new lists."""
        a, b = [1], [2]
        assert LIST_MONOID.concat(a, b) == [1, 2]
        assert a == [1]
        assert LIST_MONOID.empty == []

    def test_fold_of_nothing_is_a_fresh_empty(self):
        """Mutating one empty fold does not leak into the next."""
        first = LIST_MONOID.fold([])
        first.append('leak')
        assert LIST_MONOID.fold([]) == []
        assert LIST_MONOID.fold([['x']]) == ['x']
        assert LIST_MONOID.new_empty() is not LIST_MONOID.new_empty()

    @given(st.data())
    def test_associativity_and_identity(self, data):
        """(a+b)+c == a+(b+c) and empty is a two-sided identity."""
        monoid, elements = data.draw(monoid_samples)
        a, b, c = data.draw(elements), data.draw(elements), data.draw(elements)
        concat = monoid.concat
        assert concat(concat(a, b), c) == concat(a, concat(b, c))
        assert concat(monoid.empty, a) == a == concat(a, monoid.empty)
