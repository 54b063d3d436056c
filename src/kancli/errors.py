"""Exception hierarchy for kancli."""


class KancliError(Exception):
    """Base exception for all kancli errors."""


class StoreError(KancliError):
    """Opening, reading, writing or closing the key-value store failed."""


class SnapshotError(KancliError):
    """Stored bytes do not decode to a valid board snapshot."""


class FormClosedError(KancliError):
    """Input was sent to a form that has already been submitted or cancelled."""


class SurfaceError(KancliError):
    """A surface hand-off was requested from the wrong active surface."""


class ConfigError(KancliError):
    """Configuration cannot be applied, e.g. an unusable log file."""
