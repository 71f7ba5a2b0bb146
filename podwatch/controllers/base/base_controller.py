"""Base controller with async worker-friendly patterns for PodWatch TUI.

This module provides the foundation for background data loading using Textual
Workers, so the UI stays responsive while kubectl runs.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class BaseController(ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses implement ``refresh`` to provide a data source.
    """

    @abstractmethod
    async def refresh(self) -> dict[str, Any]:
        """Fetch the latest data and replace the held snapshot.

        Returns:
            The new snapshot

        Raises:
            Exception: Fetch failures propagate; the previous snapshot is kept.
        """
        ...
