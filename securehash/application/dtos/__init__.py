"""Data Transfer Objects for application layer."""

from securehash.application.dtos.hasher_config import HasherConfig

__all__ = ["HasherConfig"]
