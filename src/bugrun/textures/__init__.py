from .resources import ResourceCache, ResourceLoadFailure

__all__ = ["ResourceCache", "ResourceLoadFailure"]
