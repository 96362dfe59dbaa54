import abc

__all__ = ['Disposable']


def _has_callable(cls, name: str) -> bool:
    for base in cls.__mro__:
        if name in base.__dict__:
            return callable(base.__dict__[name])

    return False


class Disposable(metaclass=abc.ABCMeta):
    """
    Interface of objects holding resources which are released by calling :meth:`dispose`.

    Any class defining callable ``dispose`` and ``is_disposed`` is considered a virtual subclass,
    so third party types take part in cascading disposal without inheriting from this class.
    """

    @abc.abstractmethod
    def is_disposed(self) -> bool:
        ...

    @abc.abstractmethod
    def dispose(self):
        ...

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Disposable:
            if _has_callable(subclass, 'dispose') and _has_callable(subclass, 'is_disposed'):
                return True

        return NotImplemented

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.dispose()
