"""Tests for the MaybeT transformer."""

from hypothesis import given

from monadkit import IDENTITY, RESULT, WRITER, Err, MaybeT, Nothing, Ok, Some, Writer, maybe_t
from monadkit.laws import check_functor_laws, check_monad_laws
from tests.strategies import descriptors_with_fallback, int_functions, integers


class TestMaybeTConstruction:
    """Tests for MaybeT factory constructors."""

    def test_of(self, mt):
        """of wraps a value as monad.of(Some(value))."""
        assert mt.of(5).run() == Some(5)

    def test_from_is_unchanged(self, mt):
        """from_ wraps an existing M[Option[A]] as-is."""
        assert mt.from_(Nothing).run() == Nothing
        assert mt.from_(Some(1)).run() == Some(1)

    def test_lift(self):
        """lift marks every value of M[A] present."""
        mw = maybe_t(WRITER)
        assert mw.lift(Writer.of(3, 'log')).run() == Writer(Some(3), ('log',))

    def test_none(self, mt):
        """none builds an absent value."""
        assert mt.none().run() == Nothing

    def test_instances_are_structs(self, mt):
        """MaybeT instances carry the wrapped value and descriptor."""
        m = mt.of(1)
        assert isinstance(m, MaybeT)
        assert m.inner == Some(1)
        assert m.monad is IDENTITY


class TestMaybeTOperations:
    """Tests for map, flat_map and recovery."""

    def test_map_doubles(self, mt):
        """of(5).map(x * 2) is Some(10)."""
        assert mt.of(5).map(lambda x: x * 2).run() == Some(10)

    def test_map_on_nothing(self, mt):
        """map leaves Nothing untouched."""
        assert mt.none().map(lambda x: x * 2).run() == Nothing

    def test_flat_map_on_nothing_never_calls_continuation(self, mt, tripwire):
        """from_(Nothing).flat_map(...) is Nothing and the tripwire never fires."""
        assert mt.from_(Nothing).flat_map(tripwire).run() == Nothing
        assert not tripwire.fired

    def test_short_circuit_mid_chain(self, mt, tripwire):
        """Once a step is absent, later continuations do not run."""
        result = mt.of(1).flat_map(lambda _: mt.none()).flat_map(tripwire).map(tripwire)
        assert result.run() == Nothing
        assert not tripwire.fired

    def test_short_circuit_keeps_inner_effects(self, tripwire):
        """Nothing is returned wrapped in the effects accumulated so far."""
        mw = maybe_t(WRITER)
        chain = (
            mw.from_(Writer(Some(1), ('a',)))
            .flat_map(lambda _: mw.from_(Writer(Nothing, ('b',))))
            .flat_map(tripwire)
        )
        assert chain.run() == Writer(Nothing, ('a', 'b'))
        assert not tripwire.fired

    def test_inner_effects_accumulate(self):
        """flat_map keeps the inner monad's effects from both steps."""
        mw = maybe_t(WRITER)
        chain = mw.from_(Writer(Some(2), ('a',))).flat_map(lambda x: mw.from_(Writer(Some(x + 1), ('b',))))
        assert chain.run() == Writer(Some(3), ('a', 'b'))

    def test_inner_failure_short_circuits(self, tripwire):
        """An inner Err stops the chain before MaybeT sees a value."""
        mr = maybe_t(RESULT)
        assert mr.from_(Err('down')).flat_map(tripwire).run() == Err('down')
        assert not tripwire.fired

    def test_or_else(self, mt):
        """or_else substitutes only for Nothing."""
        assert mt.none().or_else(lambda: mt.of(7)).run() == Some(7)
        assert mt.of(1).or_else(lambda: mt.of(7)).run() == Some(1)

    def test_unwrap_or(self, mt):
        """unwrap_or collapses the optional layer."""
        assert mt.of(3).unwrap_or(0) == 3
        assert mt.none().unwrap_or(0) == 0
        assert maybe_t(RESULT).none().unwrap_or(0) == Ok(0)


class TestMaybeTLaws:
    """Monad and functor laws for MaybeT over several inner monads."""

    @given(descriptors_with_fallback, integers, int_functions, int_functions)
    def test_monad_laws(self, monad, x, f, g):
        """Left identity, right identity and associativity hold."""
        factory = maybe_t(monad)

        def k1(v):
            return factory.of(f(v)) if v % 2 == 0 else factory.none()

        def k2(v):
            return factory.of(g(v))

        assert check_monad_laws(factory, x, k1, k2) == Ok(None)

    @given(descriptors_with_fallback, integers, int_functions, int_functions)
    def test_functor_laws(self, monad, x, f, g):
        """Functor identity and composition hold for present and absent values."""
        factory = maybe_t(monad)
        assert check_functor_laws(factory.of(x), f, g) == Ok(None)
        assert check_functor_laws(factory.none(), f, g) == Ok(None)

    @given(integers, int_functions)
    def test_fallback_equivalence(self, x, f):
        """A descriptor without map gives the same results as one with it."""
        native, bare = maybe_t(WRITER), maybe_t(WRITER.without_map())
        for factory in (native, bare):
            assert factory.lift(Writer.of(x, 'l')).map(f).run() == Writer(Some(f(x)), ('l',))
        assert native.of(x).map(f).run() == bare.of(x).map(f).run()
