"""
normalization of arbitrary inputs into the python iterator protocol.

the input shape is resolved once, at the boundary, into one of the
`SourceKind` variants and then dispatched to a single normalizer.
"""
import builtins
from collections.abc import Iterable as _Iterable, Iterator as _Iterator, Mapping, Sequence, Set as _AbstractSet

from .types import *


def _absent(source: None) -> Iterator[Any]:
    return builtins.iter(())


def _passthrough(source: Iterator[T]) -> Iterator[T]:
    return source


def _mapping_items(source: Mapping) -> Iterator[Tuple[Any, Any]]:
    return builtins.iter(source.items())


def _native(source: Iterable[T]) -> Iterator[T]:
    return builtins.iter(source)


def _entries(source: Any) -> Iterator[Tuple[str, Any]]:
    """public attributes of a plain object, in definition order"""
    attributes = getattr(source, '__dict__', None)
    if not attributes:
        return builtins.iter(())
    return builtins.iter([(k, v) for k, v in attributes.items() if not k.startswith('_')])


_NORMALIZERS: Dict[SourceKind, Callable[[Any], Iterator[Any]]] = {
    SourceKind.ABSENT: _absent,
    SourceKind.ITERATOR: _passthrough,
    SourceKind.MAPPING: _mapping_items,
    SourceKind.STRING: _native,
    SourceKind.SET: _native,
    SourceKind.SEQUENCE: _native,
    SourceKind.ITERABLE: _native,
    SourceKind.ENTRIES: _entries,
}


def classify(source: Any) -> SourceKind:
    """resolve which input variant a source belongs to"""
    if source is None:
        return SourceKind.ABSENT
    # order matters: a str is a sequence, an iterator is an iterable
    if isinstance(source, _Iterator):
        return SourceKind.ITERATOR
    if isinstance(source, str):
        return SourceKind.STRING
    if isinstance(source, Mapping):
        return SourceKind.MAPPING
    if isinstance(source, _AbstractSet):
        return SourceKind.SET
    if isinstance(source, Sequence):
        return SourceKind.SEQUENCE
    if isinstance(source, _Iterable):
        return SourceKind.ITERABLE
    return SourceKind.ENTRIES


def iter(source: Any) -> Iterator[Any]:
    """
    return a pull iterator for any supported input.
    total: absent and unsupported shapes resolve to an (often empty) iterator.
    an iterator is returned unchanged, so normalizing twice never double-wraps.
    """
    return _NORMALIZERS[classify(source)](source)


def is_rereadable(source: Any) -> bool:
    """true when iterating the source twice yields the same items twice"""
    return classify(source) not in (SourceKind.ITERATOR, SourceKind.ITERABLE) or isinstance(source, Replay)
