from .cube import BuildCubeTool

__all__ = ['BuildCubeTool']
