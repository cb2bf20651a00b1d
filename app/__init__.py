"""Notification inbox service.

Layers live in ``domain``, ``application``, ``infrastructure`` and
``interfaces``; this regular package keeps ``app`` from resolving to an
unrelated namespace package installed elsewhere.
"""
