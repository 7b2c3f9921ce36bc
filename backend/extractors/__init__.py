"""Extractors package for structured competition extraction."""

from .base_extractor import BaseExtractor
from .competition_extractor import CompetitionExtractor, build_fallback_record, build_record

__all__ = ["BaseExtractor", "CompetitionExtractor", "build_fallback_record", "build_record"]
