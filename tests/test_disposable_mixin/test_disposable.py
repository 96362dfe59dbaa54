from disposable_mixin import Disposable, DisposableMixin


class Resource:
    def __init__(self):
        self.disposed = False

    def is_disposed(self):
        return self.disposed

    def dispose(self):
        self.disposed = True


class Closeable:
    def close(self):
        pass


def test_structural_subclass():
    assert issubclass(Resource, Disposable)
    assert isinstance(Resource(), Disposable)


def test_unrelated_class_is_not_disposable():
    assert not issubclass(Closeable, Disposable)
    assert not isinstance(object(), Disposable)


def test_mixin_is_disposable():
    assert issubclass(DisposableMixin, Disposable)


def test_inherited_methods_are_detected():
    class Derived(Resource):
        pass

    assert isinstance(Derived(), Disposable)


def test_context_manager_of_subclass():
    class Handle(Disposable):
        def __init__(self):
            self.disposed = False

        def is_disposed(self):
            return self.disposed

        def dispose(self):
            self.disposed = True

    with Handle() as handle:
        assert not handle.is_disposed()

    assert handle.is_disposed()
