from enum import Enum
from typing import Hashable, Iterable, Optional, Type, TypeVar

from disposable_mixin.disposable import Disposable
from disposable_mixin.exceptions import DisposeError
from disposable_mixin.helpers import STATE_ATTRIBUTE, resource_keys, release_resources
from disposable_mixin.logger import logger
from disposable_mixin.options import DisposableOptions, FinalizeCallback

__all__ = ['DisposeState', 'DisposableMixin', 'disposable_mixin']

T = TypeVar('T', bound='DisposableMixin')


class DisposeState(Enum):
    """DISPOSING guards instances calling back into themselves while being disposed."""

    ACTIVE = 'active'
    DISPOSING = 'disposing'
    DISPOSED = 'disposed'


class DisposableMixin(Disposable):
    """
    Brings :class:`Disposable` behaviour to the classes inheriting from it.

    Configure which fields are released with class keywords, or use :func:`disposable_mixin`::

        class User(DisposableMixin, resources=('name', 'address'), finalize=on_dispose):
            def __init__(self, name, address):
                super().__init__()
                self.name = name
                self.address = address

    Without ``resources`` every own field of the instance is released.
    """

    __disposable_options__ = DisposableOptions()

    def __init_subclass__(cls,
                          resources: Optional[Iterable[Hashable]] = None,
                          finalize: Optional[FinalizeCallback] = None,
                          **kwargs):
        super().__init_subclass__(**kwargs)

        if resources is not None or finalize is not None:
            inherited = cls.__disposable_options__
            cls.__disposable_options__ = DisposableOptions.create(
                inherited.resources if resources is None else resources,
                inherited.finalize if finalize is None else finalize
            )

    def __init__(self, *args, **kwargs):
        setattr(self, STATE_ATTRIBUTE, DisposeState.ACTIVE)
        super().__init__(*args, **kwargs)

    def _dispose_state(self) -> DisposeState:
        return getattr(self, STATE_ATTRIBUTE, DisposeState.ACTIVE)

    def is_disposed(self) -> bool:
        return self._dispose_state() is DisposeState.DISPOSED

    def dispose(self: T) -> T:
        if self._dispose_state() is not DisposeState.ACTIVE:
            return self

        options = self.__disposable_options__
        logger().debug('Disposing %s', type(self).__name__)

        setattr(self, STATE_ATTRIBUTE, DisposeState.DISPOSING)

        try:
            if options.finalize is not None:
                options.finalize(self)

            resources = options.resources

            if resources is None:
                resources = resource_keys(self)

            errors = release_resources(self, resources)
        except BaseException:
            setattr(self, STATE_ATTRIBUTE, DisposeState.ACTIVE)
            raise

        setattr(self, STATE_ATTRIBUTE, DisposeState.DISPOSED)

        if errors:
            raise DisposeError(self, errors)

        return self


def disposable_mixin(resources: Optional[Iterable[Hashable]] = None,
                     finalize: Optional[FinalizeCallback] = None) -> Type[DisposableMixin]:
    """
    Creates a :class:`DisposableMixin` base class bound to the given configuration.

    :param resources: ordered names of the fields to release on dispose, all own fields if omitted
    :param finalize: callback invoked with the instance before its resources are released
    """

    class ConfiguredDisposableMixin(DisposableMixin):
        __disposable_options__ = DisposableOptions.create(resources, finalize)

    ConfiguredDisposableMixin.__name__ = ConfiguredDisposableMixin.__qualname__ = 'DisposableMixin'
    return ConfiguredDisposableMixin
