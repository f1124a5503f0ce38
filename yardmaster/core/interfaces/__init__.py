"""
Core Interfaces Package

Interface definitions for the position index and train builder.
"""

from .i_position_index import IPositionIndex
from .i_train_builder import ITrainBuilder

__all__ = [
    'IPositionIndex',
    'ITrainBuilder',
]
