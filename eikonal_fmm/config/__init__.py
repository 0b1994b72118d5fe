"""
Configuration management for eikonal_fmm.

>>> from eikonal_fmm.config import FastMarchingConfig
>>> config = FastMarchingConfig(margin=0, limit=10.0, stop_at_limit=True)
"""

from .fmm_configs import FastMarchingConfig
from .io import load_marching_config, save_marching_config

__all__ = [
    "FastMarchingConfig",
    "load_marching_config",
    "save_marching_config",
]
