"""
Replay of recorded accelerometer samples from a text file.
"""

import logging
import re
from typing import Iterator, List, Optional

from posture.sensors import RawSample

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"[,;\s]+")


def parse_sample_line(line: str) -> Optional[RawSample]:
    """
    Parse one ``x,y,z`` line.

    Commas, semicolons and whitespace all separate fields. Blank lines and
    ``#`` comments give None.

    Raises:
        ValueError: If the line is not three integers
    """
    line = line.split('#', 1)[0].strip()
    if not line:
        return None
    fields = [f for f in _SEPARATOR.split(line) if f]
    return RawSample.from_sequence([int(f) for f in fields])


class ReplaySource:
    """
    Sample source that plays back a recording.

    Each non-comment line holds one raw reading. A non-numeric first line is
    treated as a header. Malformed lines are logged and skipped.
    """

    def __init__(self, path: str, loop: bool = False):
        """
        Args:
            path: Recording file
            loop: Restart from the first sample when the recording ends
        """
        self.path = path
        self.loop = loop
        self.samples: List[RawSample] = []
        self.skipped_lines = 0
        self._index = 0
        self.initialized = False

    def initialize(self) -> bool:
        """
        Load the recording.

        Returns:
            True if at least one sample was read
        """
        try:
            with open(self.path, 'r') as f:
                lines = f.readlines()
        except OSError as e:
            logger.error("Replay: cannot open %s: %s", self.path, e)
            return False

        self.samples = []
        self.skipped_lines = 0
        for number, line in enumerate(lines, start=1):
            try:
                sample = parse_sample_line(line)
            except ValueError:
                if number == 1:
                    logger.debug("Replay: treating first line as header")
                else:
                    logger.warning("Replay: skipping malformed line %d: %r", number, line.strip())
                    self.skipped_lines += 1
                continue
            if sample is not None:
                self.samples.append(sample)

        self._index = 0
        self.initialized = bool(self.samples)
        if not self.initialized:
            logger.error("Replay: no samples in %s", self.path)
        else:
            logger.info("Replay: loaded %d samples from %s", len(self.samples), self.path)
        return self.initialized

    @property
    def exhausted(self) -> bool:
        return not self.loop and self._index >= len(self.samples)

    def read_sample(self) -> Optional[RawSample]:
        """Next recorded sample, or None when the recording is finished."""
        if not self.samples:
            return None
        if self._index >= len(self.samples):
            if not self.loop:
                return None
            self._index = 0
        sample = self.samples[self._index]
        self._index += 1
        return sample

    def __iter__(self) -> Iterator[RawSample]:
        while True:
            sample = self.read_sample()
            if sample is None:
                return
            yield sample

    def cleanup(self):
        self._index = 0
