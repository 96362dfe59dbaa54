from collections.abc import MutableMapping, MutableSequence
from typing import Any, Hashable, Iterable, List, Optional

from disposable_mixin.disposable import Disposable
from disposable_mixin.exceptions import DisposeError
from disposable_mixin.logger import logger

__all__ = [
    'STATE_ATTRIBUTE',
    'dispose',
    'dispose_resources',
    'is_disposable',
    'is_disposed',
    'resource_keys',
]

STATE_ATTRIBUTE = '_disposable_state'

_missing = object()


def is_disposable(target: Any) -> bool:
    return target is not None and isinstance(target, Disposable)


def is_disposed(target: Any) -> bool:
    """
    Null values are considered disposed. Values not implementing :class:`Disposable` never are.
    """
    if target is None:
        return True

    if is_disposable(target):
        return target.is_disposed()

    return False


def _slot_names(cls) -> List[str]:
    names = []

    for base in reversed(cls.__mro__):
        slots = base.__dict__.get('__slots__', ())

        if isinstance(slots, str):
            slots = (slots,)

        for name in slots:
            if name not in ('__dict__', '__weakref__') and name not in names:
                names.append(name)

    return names


def resource_keys(target: Any) -> List[Hashable]:
    """
    Keys of the own fields of ``target``, in definition order.

    Mappings yield their keys, sequences their indices, other objects their instance attributes
    (both ``__dict__`` and assigned ``__slots__``). Disposal state kept by
    :class:`DisposableMixin <disposable_mixin.mixin.DisposableMixin>` is never included.
    """
    if target is None:
        return []

    if isinstance(target, MutableMapping):
        return list(target.keys())

    if isinstance(target, MutableSequence):
        return list(range(len(target)))

    keys = []

    for name in _slot_names(type(target)):
        if getattr(target, name, _missing) is not _missing:
            keys.append(name)

    instance_dict = getattr(target, '__dict__', None)

    if isinstance(instance_dict, dict):
        keys.extend(name for name in instance_dict if name not in keys)

    return [key for key in keys if key != STATE_ATTRIBUTE]


def _is_index(target: Any, key: Hashable) -> bool:
    return isinstance(key, int) and not isinstance(key, bool) and -len(target) <= key < len(target)


def _read(target: Any, key: Hashable) -> Any:
    if isinstance(target, MutableMapping):
        return target.get(key)

    if isinstance(target, MutableSequence):
        return target[key] if _is_index(target, key) else None

    return getattr(target, key, None)


def _clear(target: Any, key: Hashable):
    # sequences only have their existing integer indices cleared
    if isinstance(target, MutableMapping):
        target[key] = None
    elif isinstance(target, MutableSequence):
        if _is_index(target, key):
            target[key] = None
    else:
        setattr(target, key, None)


def release_resources(target: Any, resources: Iterable[Hashable]) -> List[Exception]:
    errors = []

    for key in resources:
        resource = _read(target, key)

        if is_disposable(resource) and not resource.is_disposed():
            try:
                resource.dispose()
            except Exception as exception:
                logger().warning('Failed disposing resource %r of %s', key, type(target).__name__,
                                 exc_info=True)
                errors.append(exception)

        _clear(target, key)

    return errors


def dispose_resources(target: Any, resources: Optional[Iterable[Hashable]]):
    """
    Disposes the values of the given fields of ``target`` and sets those fields to ``None``.

    Every field is released even if disposing one of the values fails. Such failures are raised
    afterwards as a single :class:`DisposeError`.

    :param target: object, mapping or mutable sequence holding the resources
    :param resources: ordered keys of the fields to release
    """
    if target is None or resources is None:
        return

    errors = release_resources(target, resources)

    if errors:
        raise DisposeError(target, errors)


def dispose(target: Any):
    """
    Disposes any value. Implementations of :class:`Disposable` are disposed unless already done,
    anything else has all of its own fields released.
    """
    if target is None:
        return

    if is_disposable(target):
        if not target.is_disposed():
            target.dispose()

        return

    logger().debug('Disposing fields of %s', type(target).__name__)

    dispose_resources(target, resource_keys(target))
