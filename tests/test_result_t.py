"""Tests for the ResultT transformer."""

from hypothesis import given

from monadkit import IDENTITY, WRITER, Err, Ok, ResultT, Writer, result_t
from monadkit.laws import check_functor_laws, check_monad_laws
from tests.strategies import descriptors_with_fallback, error_values, int_functions, integers


def positive(rt):
    def check(x):
        return rt.of(x) if x > 0 else rt.from_(Err('neg'))

    return check


class TestResultTConstruction:
    """Tests for ResultT factory constructors."""

    def test_of(self, rt):
        """of wraps a value as monad.of(Ok(value))."""
        assert rt.of(1).run() == Ok(1)

    def test_err(self, rt):
        """err wraps an error as monad.of(Err(error))."""
        assert rt.err('bad').run() == Err('bad')

    def test_from_and_lift(self):
        """from_ wraps as-is, lift marks every value Ok."""
        rw = result_t(WRITER)
        assert rw.from_(Writer(Err('e'), ('x',))).run() == Writer(Err('e'), ('x',))
        assert rw.lift(Writer.of(2, 'x')).run() == Writer(Ok(2), ('x',))

    def test_instance_type(self, rt):
        """Constructors return ResultT instances."""
        assert isinstance(rt.of(1), ResultT)


class TestResultTOperations:
    """Tests for map, map_err, flat_map and recovery."""

    def test_flat_map_ok(self, rt):
        """of(10) through a positivity check stays Ok(10)."""
        assert rt.of(10).flat_map(positive(rt)).run() == Ok(10)

    def test_flat_map_err(self, rt):
        """of(-1) through a positivity check becomes Err('neg')."""
        assert rt.of(-1).flat_map(positive(rt)).run() == Err('neg')

    def test_first_error_is_observed(self, rt, tripwire):
        """The original error object reaches the end of the chain unchanged."""
        first = ValueError('first')
        result = rt.of(1).flat_map(lambda _: rt.err(first)).flat_map(tripwire).map(tripwire).run()
        assert result.error is first
        assert not tripwire.fired

    def test_map_passes_err_through(self, rt):
        """map does not touch Err."""
        assert rt.err('e').map(lambda x: x + 1).run() == Err('e')

    def test_map_err(self, rt):
        """map_err is the one operation that rewrites the error."""
        assert rt.err('e').map_err(str.upper).run() == Err('E')
        assert rt.of(1).map_err(str.upper).run() == Ok(1)

    def test_or_else(self, rt):
        """or_else recovers using the error value."""
        assert rt.err('abc').or_else(lambda e: rt.of(len(e))).run() == Ok(3)
        assert rt.of(1).or_else(lambda e: rt.of(0)).run() == Ok(1)

    def test_unwrap_or(self, rt):
        """unwrap_or collapses the result layer."""
        assert rt.of(4).unwrap_or(0) == 4
        assert rt.err('e').unwrap_or(0) == 0

    def test_effects_before_error_are_kept(self, tripwire):
        """An Err is returned with the inner effects accumulated so far."""
        rw = result_t(WRITER)
        chain = rw.from_(Writer(Ok(1), ('a',))).flat_map(lambda _: rw.from_(Writer(Err('x'), ('b',))))
        assert chain.flat_map(tripwire).run() == Writer(Err('x'), ('a', 'b'))
        assert not tripwire.fired


class TestResultTLaws:
    """Monad and functor laws for ResultT over several inner monads."""

    @given(descriptors_with_fallback, integers, error_values, int_functions)
    def test_monad_laws(self, monad, x, e, f):
        """Left identity, right identity and associativity hold."""
        factory = result_t(monad)

        def k1(v):
            return factory.of(f(v)) if v >= 0 else factory.err(e)

        def k2(v):
            return factory.of(v * 3)

        assert check_monad_laws(factory, x, k1, k2) == Ok(None)

    @given(descriptors_with_fallback, integers, error_values, int_functions, int_functions)
    def test_functor_laws(self, monad, x, e, f, g):
        """Functor identity and composition hold for Ok and Err."""
        factory = result_t(monad)
        assert check_functor_laws(factory.of(x), f, g) == Ok(None)
        assert check_functor_laws(factory.err(e), f, g) == Ok(None)

    @given(integers, int_functions)
    def test_fallback_equivalence(self, x, f):
        """A descriptor without map gives the same results as one with it."""
        native, bare = result_t(IDENTITY), result_t(IDENTITY.without_map())
        assert native.of(x).map(f).run() == bare.of(x).map(f).run() == Ok(f(x))
