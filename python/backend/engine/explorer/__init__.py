from backend.engine.explorer.explorer import PathExplorer

__all__ = ["PathExplorer"]
