"""Factories wiring ports into application queries."""

from bkper_sdk.application.factories.port_factory import PortFactory

__all__ = ["PortFactory"]
