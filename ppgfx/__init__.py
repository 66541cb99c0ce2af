"""Framebuffers, line drawing, Bezier curves, ray casting, path tracing, rasterization and a small game scene model."""

__version__ = "0.1.0"