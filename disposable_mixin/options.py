from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Optional, Tuple

__all__ = ['DisposableOptions', 'FinalizeCallback']

FinalizeCallback = Callable[[Any], None]


@dataclass(frozen=True)
class DisposableOptions:
    """
    Disposal configuration of a host type.

    :param resources: ordered keys of the fields released on dispose. ``None`` releases every own field.
    :param finalize: callback invoked with the instance before its resources are released.
    """

    resources: Optional[Tuple[Hashable, ...]] = None
    finalize: Optional[FinalizeCallback] = None

    @classmethod
    def create(cls,
               resources: Optional[Iterable[Hashable]] = None,
               finalize: Optional[FinalizeCallback] = None) -> 'DisposableOptions':
        if finalize is not None and not callable(finalize):
            raise TypeError('finalize must be callable, got %r' % (finalize,))

        if resources is not None:
            if isinstance(resources, (str, bytes)):
                resources = (resources,)

            resources = tuple(resources) or None

        return cls(resources, finalize)
