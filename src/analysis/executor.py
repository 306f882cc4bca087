# src/analysis/executor.py
"""Analysis executors that supply raw analysis payloads."""

import copy
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import aiofiles

logger = logging.getLogger(__name__)


class BaseAnalysisExecutor(ABC):
    """Abstract source of token analysis payloads.

    Implementations return the raw payload; callers validate it with
    AnalysisResult.
    """

    @abstractmethod
    async def execute(self, intent: str) -> dict[str, Any]:
        """Run an analysis.

        Args:
            intent: Free-text description of what to analyze.

        Returns:
            Raw payload with "success" and "data" keys.
        """
        pass


class StaticAnalysisExecutor(BaseAnalysisExecutor):
    """Returns a fixed payload for every intent."""

    def __init__(self, payload: dict[str, Any]):
        self._payload = payload
        self.intents: list[str] = []

    async def execute(self, intent: str) -> dict[str, Any]:
        self.intents.append(intent)
        return copy.deepcopy(self._payload)


class JsonFileAnalysisExecutor(BaseAnalysisExecutor):
    """Reads the payload from a JSON file on every call.

    A payload without a "success" key is treated as bare analysis data
    and wrapped as a successful result.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    async def execute(self, intent: str) -> dict[str, Any]:
        logger.debug(f"Loading analysis for '{intent}' from {self._path}")
        async with aiofiles.open(self._path, "r") as f:
            content = await f.read()

        payload = json.loads(content)
        if "success" not in payload:
            return {"success": True, "data": payload}
        return payload
