import logging
from contextlib import ContextDecorator

_checking_enabled = True


def element_checking_enabled():
    """Return True if elements are validated on insertion."""
    return _checking_enabled


def pause_element_checking():
    """Switch off element checking."""
    global _checking_enabled
    _checking_enabled = False
    logging.info("Set element checking is switched off")


def continue_element_checking():
    """Switch on element checking."""
    global _checking_enabled
    _checking_enabled = True
    return _checking_enabled


class stop_element_checking(ContextDecorator):
    """A context manager and function decorator within which element checking is stopped.

    Example usage:

        .. highlight:: python
        .. code-block:: python

            with stop_element_checking():
                s = Set(1, "a")

            @stop_element_checking()
            def build():
                return Set(1, "a")

    """

    def __init__(self):
        # Nested use, e.g. through the `no_element_checking` decorator,
        # needs a stack of the original states.
        self._orig_checking_enabled = []

    def __enter__(self):
        global _checking_enabled
        self._orig_checking_enabled.append(_checking_enabled)
        _checking_enabled = False

    def __exit__(self, *args):
        global _checking_enabled
        _checking_enabled = self._orig_checking_enabled.pop()


no_element_checking = stop_element_checking()
"""Decorator to turn off element checking for the decorated function."""
