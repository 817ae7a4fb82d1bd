from .scene import Scene

__all__ = ["Scene"]
