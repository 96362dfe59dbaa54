import logging


def logger():
    return logging.getLogger('disposable_mixin')
