from typing import Any

from reactivex.abc import DisposableBase
from reactivex.disposable import Disposable as ReactiveXDisposableAction

from disposable_mixin.disposable import Disposable
from disposable_mixin.helpers import dispose

__all__ = ['ReactiveXDisposable', 'from_reactivex', 'to_reactivex']


class ReactiveXDisposable(Disposable):
    """
    Exposes a reactivex disposable (e.g. a subscription) as a :class:`Disposable`,
    so it is released when the object holding it is disposed.
    """

    __slots__ = ('_disposable', '_disposed')

    def __init__(self, disposable: DisposableBase):
        self._disposable = disposable
        self._disposed = False

    @property
    def disposable(self) -> DisposableBase:
        return self._disposable

    def is_disposed(self) -> bool:
        disposed = getattr(self._disposable, 'is_disposed', self._disposed)

        if callable(disposed):
            disposed = disposed()

        return bool(disposed)

    def dispose(self) -> 'ReactiveXDisposable':
        if not self.is_disposed():
            self._disposable.dispose()
            self._disposed = True

        return self


def from_reactivex(disposable: DisposableBase) -> ReactiveXDisposable:
    return ReactiveXDisposable(disposable)


def to_reactivex(target: Any) -> DisposableBase:
    """
    Wraps any value in a reactivex disposable which calls :func:`dispose <disposable_mixin.helpers.dispose>`
    on it, e.g. to add a host object to a ``CompositeDisposable``.
    """

    def action():
        dispose(target)

    return ReactiveXDisposableAction(action)
