"""Classic teaching algorithms: sorting, number utilities, text checks and worker demos."""

__version__ = "0.1.0"
__all__ = ["cli", "mathutils", "sorting", "text", "workers"]