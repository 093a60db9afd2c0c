"""Monad transformers: MaybeT, ResultT, ReaderT, WriterT.

Each factory takes a MonadDescriptor for the inner monad (and a Monoid for
WriterT) and exposes `of`, `from_` and `lift`. Factories expose their own
`descriptor`, so transformers stack to any depth:

    RT = result_t(IDENTITY)
    MT = maybe_t(RT.descriptor)   # M[A] = Result[Option[A], E]
"""

from monadkit.transformer.maybe_t import MaybeT, MaybeTFactory, maybe_t
from monadkit.transformer.reader_t import ReaderT, ReaderTFactory, reader_t
from monadkit.transformer.result_t import ResultT, ResultTFactory, result_t
from monadkit.transformer.writer_t import WriterT, WriterTFactory, writer_t

__all__ = [
    'MaybeT',
    'MaybeTFactory',
    'ReaderT',
    'ReaderTFactory',
    'ResultT',
    'ResultTFactory',
    'WriterT',
    'WriterTFactory',
    'maybe_t',
    'reader_t',
    'result_t',
    'writer_t',
]
