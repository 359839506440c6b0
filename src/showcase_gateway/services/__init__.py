"""Service layer for the showcase gateway."""

from .gateway import RemoteDataGateway

__all__ = ["RemoteDataGateway"]
