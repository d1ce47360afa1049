class CorrectionError(RuntimeError):
    """Raised to the caller when a correction request cannot be completed."""


class ProviderFailure(CorrectionError):
    """Network, HTTP or decoding failure while talking to LanguageTool."""


class MalformedMatch(ValueError):
    """A provider match whose offsets do not fit the submitted text."""
