"""Domain layer: station list and playback state."""
