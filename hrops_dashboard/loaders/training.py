"""Decoder for training records."""

import logging

from ..models import TrainingRow
from .utils import RawGrid, split_grid

logger = logging.getLogger(__name__)


def decode_training(grid: RawGrid) -> list[TrainingRow]:
    """Training uploads are accepted but not decoded yet; always returns []."""
    split_grid(grid, "Training")
    logger.info("Training sheet received; no training rows are decoded")
    return []
