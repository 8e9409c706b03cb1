"""Hosted photo storage adapter."""

from .client import MockPhotoStorage, RealPhotoStorage, TapestryPhotoStorage

__all__ = ["TapestryPhotoStorage", "RealPhotoStorage", "MockPhotoStorage"]
