from typing import Any, List


class DisposableError(Exception):
    pass


class DisposeError(DisposableError):
    def __init__(self, instance: Any, errors: List[Exception]):
        self.instance = instance
        self.errors = errors

    def __str__(self) -> str:
        return 'Failed disposing %d resource(s) of %s: %s' % (
            len(self.errors),
            type(self.instance).__name__,
            ', '.join(repr(error) for error in self.errors)
        )
