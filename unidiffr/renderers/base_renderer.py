#!/usr/bin/env python3

from abc import ABC, abstractmethod
from typing import Dict, Any

from unidiffr.models import Diff


class BaseRenderer(ABC):
    """
    Base class for all diff renderers.
    Each renderer should implement the render method.
    """

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.name = self.__class__.__name__

    @abstractmethod
    def render(self, diff: Diff) -> str:
        """
        Render a parsed diff as text.

        Args:
            diff: Parsed Diff

        Returns:
            The rendered output, without a trailing newline
        """
        pass
