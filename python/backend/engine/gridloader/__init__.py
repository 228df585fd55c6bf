from backend.engine.gridloader.loader import SYMBOLS, GridLoader

__all__ = ["SYMBOLS", "GridLoader"]
