"""Exception types shared across the KVision project wizard."""

from __future__ import annotations


class KvWizardError(Exception):
    """Base class for every error raised by the wizard."""


class VersionFetchError(KvWizardError):
    """Raised when remote version metadata cannot be fetched or parsed."""

    def __init__(self, message: str, url: str = ""):
        self.url = url
        super().__init__(message)


class MaterializationError(KvWizardError):
    """Raised when a single file cannot be rendered or written."""

    def __init__(self, message: str, template_id: str = "", destination: str = ""):
        self.template_id = template_id
        self.destination = destination
        super().__init__(message)


class GenerationError(KvWizardError):
    """Describes a failure that reached the generator boundary."""

    def __init__(self, kind: str, message: str):
        self.kind = kind
        super().__init__(message)
