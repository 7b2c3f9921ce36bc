"""Base extractor class for structured competition extraction."""

import logging
from typing import Dict, Any, Optional
from abc import ABC, abstractmethod

import llm

logger = logging.getLogger(__name__)

class BaseExtractor(ABC):
    """Base class for extractors with a language-model path and a heuristic fallback."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize the extractor with configuration."""
        self.config = config or {}
        self.ai_available = self._check_ai_availability()

    def _check_ai_availability(self) -> bool:
        """Check if the language model can be used."""
        if not self.config.get('use_ai', True):
            return False
        if not llm.is_ai_enabled():
            logger.info("OpenAI API key not configured, using heuristic extraction")
            return False
        return True

    @abstractmethod
    async def extract(self, text: str, **kwargs) -> Dict[str, Any]:
        """Extract a structured record from text."""
        pass

    @abstractmethod
    async def _extract_ai(self, text: str, **kwargs) -> Dict[str, Any]:
        """Extract using the language model."""
        pass

    @abstractmethod
    def extract_fallback(self, text: str, **kwargs) -> Dict[str, Any]:
        """Fallback extraction method when the language model is not available."""
        pass

    async def _safe_extract(self, text: str, **kwargs) -> Dict[str, Any]:
        """Safely extract with fallback to heuristic methods."""
        if self.ai_available:
            try:
                return await self._extract_ai(text, **kwargs)
            except Exception as e:
                logger.warning(f"AI extraction failed: {e}, falling back to heuristic method")
                return self.extract_fallback(text, **kwargs)
        else:
            return self.extract_fallback(text, **kwargs)
