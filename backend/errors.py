from __future__ import annotations


class CompetitionError(Exception):
    """Base class for errors raised while analyzing a competition."""


class InputError(CompetitionError):
    """The request is missing required fields or carries an unusable URL."""


class UpstreamFetchError(CompetitionError):
    """The competition page could not be fetched; there is no text to mine."""


class ModelError(CompetitionError):
    """The language model failed or returned an unusable reply.

    Never surfaced to callers: the extractor falls back to heuristics.
    """
