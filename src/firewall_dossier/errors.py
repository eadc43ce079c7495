"""Exceptions raised at the public boundaries of firewall-dossier."""


class DossierError(Exception):
    """Base class for all firewall-dossier errors."""


class NilDeviceError(DossierError):
    """A converter was handed no device configuration."""

    def __init__(self) -> None:
        super().__init__("device configuration is nil")


class UnsupportedFormatError(DossierError):
    def __init__(self, fmt: str) -> None:
        super().__init__(f"unsupported format: {fmt}")
        self.format = fmt


class ConfigLoadError(DossierError):
    """A settings file or device document could not be read or validated."""
