from .config_loader import load_config, load_meta_config
from .logger import get_logger

__all__ = ["get_logger", "load_config", "load_meta_config"]
