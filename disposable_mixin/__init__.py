"""
Disposable Mixin
~~~~~~~~~~~~~~~~

Brings idempotent, cascading disposal to Python classes.
"""
from disposable_mixin.disposable import Disposable
from disposable_mixin.exceptions import DisposableError, DisposeError
from disposable_mixin.helpers import dispose, dispose_resources, is_disposable, is_disposed, resource_keys
from disposable_mixin.mixin import DisposableMixin, DisposeState, disposable_mixin
from disposable_mixin.options import DisposableOptions

__all__ = [
    'Disposable',
    'DisposableError',
    'DisposeError',
    'DisposableMixin',
    'DisposableOptions',
    'DisposeState',
    'disposable_mixin',
    'dispose',
    'dispose_resources',
    'is_disposable',
    'is_disposed',
    'resource_keys',
]
