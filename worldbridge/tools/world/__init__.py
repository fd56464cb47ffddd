from .tool import WorldTool, get_time_description

__all__ = ['WorldTool', 'get_time_description']
