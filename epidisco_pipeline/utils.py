# -*- coding: utf-8 -*-
"""Utility code"""


def listify(gen):
    """Decorator that converts a generator into a function which returns a list

    Use it in the case where a generator is easier to write but you want
    to enforce returning a list::

        @listify
        def counter(max_no):
            i = 0
            while i <= max_no:
                yield i
    """

    def patched(*args, **kwargs):
        """Wrapper function"""
        return list(gen(*args, **kwargs))

    return patched


def first_present[T](*values: T | None) -> T | None:
    """Return the first of ``values`` that is not ``None``, ``None`` if there is none"""
    return next((value for value in values if value is not None), None)

