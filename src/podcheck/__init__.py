"""podcheck: line-accurate validation of Pod manifests."""

__version__ = "0.1.0"
