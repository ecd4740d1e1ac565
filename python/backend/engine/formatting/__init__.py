from backend.engine.formatting.step import SINGLE_TILE_STEP, format_step

__all__ = ["SINGLE_TILE_STEP", "format_step"]
