"""
Error taxonomy for the script generation pipeline.

Only ValidationError and GenerationError (plus ConfigurationError, reported
generically) ever reach the client. UpstreamFetchFailure is raised and caught
inside the fetch services, which recover with fallback data.
"""


class ScriptGenError(Exception):
    """Base class for pipeline errors."""


class ValidationError(ScriptGenError):
    """Missing or malformed input; maps to HTTP 400."""


class ConfigurationError(ScriptGenError):
    """A collaborator credential is not configured."""


class UpstreamFetchFailure(ScriptGenError):
    """A scrape or enrichment call failed; always recovered with fallback data."""


class GenerationError(ScriptGenError):
    """The completion call failed; no local fallback exists."""
