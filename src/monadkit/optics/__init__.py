"""Lenses and prisms over immutable data."""

from monadkit.optics.lens import Lens
from monadkit.optics.prism import Prism

__all__ = ['Lens', 'Prism']
