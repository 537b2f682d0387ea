"""
"Now playing" metadata publishing.

The publisher keeps one JSON document in the runtime directory that status
bar widgets (waybar, polybar, conky...) can poll.
"""

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from loguru import logger


@dataclass(frozen=True)
class NowPlayingInfo:
    """Metadata for the station being played."""

    title: str
    asset_url: str
    playback_rate: float = 0.0
    media_type: str = "audio"
    is_live_stream: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Publish record; the title doubles as the subtitle."""
        return {
            "mediaType": self.media_type,
            "isLiveStream": self.is_live_stream,
            "playbackRate": self.playback_rate,
            "title": self.title,
            "subtitle": self.title,
            "assetURL": self.asset_url,
        }


class NowPlayingFile:
    """Writes now-playing metadata and playback state to a JSON file."""

    def __init__(self, path: Path):
        self.path = path
        self.info: Optional[NowPlayingInfo] = None
        self.playback_state = "stopped"

    def publish(self, info: NowPlayingInfo) -> None:
        self.info = info
        self._write()

    def set_playback_state(self, state: str) -> None:
        self.playback_state = state
        self._write()

    def snapshot(self) -> dict[str, Any]:
        """Current document contents."""
        document: dict[str, Any] = {"playbackState": self.playback_state}
        if self.info is not None:
            document["nowPlaying"] = self.info.to_dict()
        return document

    def _write(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=".now-playing-", suffix=".json"
            )
        except OSError as e:
            logger.warning(f"Failed to write now-playing file {self.path}: {e}")
            return

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self.snapshot(), f, indent=2)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Failed to write now-playing file {self.path}: {e}")
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
