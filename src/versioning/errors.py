"""Error taxonomy for version resolution.

Every ``ResolutionError`` is fatal to the run: nothing here is retried or
recovered from above the fetch layer.
"""


class ResolutionError(Exception):
    """Base class for errors that abort a resolution run."""


class SpecNotFound(ResolutionError):
    """The requested spec matches nothing in the published version list."""


class IncompatiblePairing(ResolutionError):
    """The resolved paired version was not built for the requested primary major."""


class MirrorExhausted(ResolutionError):
    """Every mirror in the list failed to serve the resource."""


class MalformedListing(ResolutionError):
    """A remote listing payload is not in the expected shape."""


class UnsupportedPlatform(ResolutionError):
    """No listing source is known for the supplied platform identifier."""


class ListingFetchError(Exception):
    """A single fetch failed (transport error or 4xx/5xx status)."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class InputError(ValueError):
    """User input is inconsistent (conflicting specs, bad version file, ...)."""
