from disposable_mixin.reactivex.adapters import ReactiveXDisposable, from_reactivex, to_reactivex

__all__ = ['ReactiveXDisposable', 'from_reactivex', 'to_reactivex']
