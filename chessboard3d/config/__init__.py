"""
Configuration models for the chess scene.

Models are plain dataclasses with from_dict/to_dict; load_config reads them
from YAML on top of the packaged defaults.
"""

from .loader import DEFAULT_CONFIG_PATH, load_config, merge_config
from .models import BoardModel, ChessSceneConfig, MaterialModel, PiecesModel

__all__ = [
    'MaterialModel',
    'BoardModel',
    'PiecesModel',
    'ChessSceneConfig',
    'DEFAULT_CONFIG_PATH',
    'load_config',
    'merge_config'
]
