"""Example applications — message-driven forms built on the field core.

A host UI framework would own rendering and the event loop. These apps
stand in for it: callers feed plain message objects to ``update`` and
submission is a pure function returning an :class:`AppResult`.
"""
