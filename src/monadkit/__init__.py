"""monadkit: composable monad transformers for Python 3.13+.

MaybeT, ResultT, ReaderT and WriterT layered over any inner monad described
by a MonadDescriptor, plus the base Option/Result/Reader/Writer types, lenses,
prisms, law checkers and small function utilities.

Flat imports (preferred):
    from monadkit import IDENTITY, maybe_t, result_t, Some, Ok, Err

Submodule imports (for organization):
    from monadkit.transformer import MaybeT, ResultT
    from monadkit.optics import Lens, Prism
    from monadkit.fn import pipe, add
    from monadkit.laws import check_monad_laws
"""

# Configuration and logging
from monadkit import fn, laws
from monadkit._config import ToolkitConfig, get_config, init
from monadkit._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Errors
from monadkit.errors import (
    LawViolation,
    LawViolationError,
    MalformedDescriptor,
    MalformedDescriptorError,
)

# Descriptors and monoids
from monadkit.monad import (
    IDENTITY,
    LIST_MONOID,
    OPTION,
    PRODUCT_MONOID,
    READER,
    RESULT,
    STRING_MONOID,
    SUM_MONOID,
    TUPLE_MONOID,
    WRITER,
    MonadDescriptor,
    Monoid,
    fmap,
    map_via_flat_map,
)

# Optics
from monadkit.optics import Lens, Prism

# Transformers
from monadkit.transformer import (
    MaybeT,
    MaybeTFactory,
    ReaderT,
    ReaderTFactory,
    ResultT,
    ResultTFactory,
    WriterT,
    WriterTFactory,
    maybe_t,
    reader_t,
    result_t,
    writer_t,
)

# Base types
from monadkit.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Reader,
    Result,
    Some,
    Tagged,
    Writer,
    collect,
    from_nullable,
    from_try,
)

__all__ = [
    # Descriptors and monoids
    'IDENTITY',
    'LIST_MONOID',
    'OPTION',
    'PRODUCT_MONOID',
    'READER',
    'RESULT',
    'STRING_MONOID',
    'SUM_MONOID',
    'TUPLE_MONOID',
    'WRITER',
    # Base types
    'Err',
    # Errors
    'LawViolation',
    'LawViolationError',
    # Optics
    'Lens',
    'MalformedDescriptor',
    'MalformedDescriptorError',
    # Transformers
    'MaybeT',
    'MaybeTFactory',
    'MonadDescriptor',
    'Monoid',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Prism',
    'Reader',
    'ReaderT',
    'ReaderTFactory',
    'Result',
    'ResultT',
    'ResultTFactory',
    'Some',
    'Tagged',
    # Configuration and logging
    'ToolkitConfig',
    'Writer',
    'WriterT',
    'WriterTFactory',
    'add_log_hook',
    'clear_log_hooks',
    'collect',
    'configure_logging',
    'fmap',
    'fn',
    'from_nullable',
    'from_try',
    'get_config',
    'get_logger',
    'init',
    'laws',
    'map_via_flat_map',
    'maybe_t',
    'reader_t',
    'remove_log_hook',
    'result_t',
    'writer_t',
]

__version__ = '0.1.0'
