"""Procedural cylinder and sphere meshes, a first-person camera, input controls and matrix helpers."""

__version__ = "0.1.0"
__all__ = ["camera", "controls", "cylinder", "meshutil", "sphere", "transforms"]