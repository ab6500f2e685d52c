"""Rendering package for the HTML environment page."""

from .renderer import EnvironmentPageRenderer

__all__ = ["EnvironmentPageRenderer"]
