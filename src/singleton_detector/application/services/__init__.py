"""Application services."""

from singleton_detector.application.services.driver import Driver

__all__ = ["Driver"]
