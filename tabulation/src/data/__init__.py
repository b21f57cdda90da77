from .loader import load_tabulation

__all__ = ["load_tabulation"]
