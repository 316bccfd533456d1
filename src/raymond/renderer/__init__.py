from raymond.renderer.image import Image

__all__ = ["Image"]
