"""Radio Player - streaming radio stations with media-key control."""

__version__ = "0.1.0"
