"""Shared helpers."""
from .binary import IoBuffer, ByteOrder

__all__ = ['IoBuffer', 'ByteOrder']
