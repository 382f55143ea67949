"""Application layer: Checker and failure writers."""

from ischeck.application.checker import Checker, new, relaxed

__all__ = ["Checker", "new", "relaxed"]
