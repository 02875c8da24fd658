"""Bounded line reader over a gzip/bgzip (or plain) text file.

Compression is detected from the gzip magic bytes rather than the file
extension, so ``.vcf.gz``, ``.vcf.bgz`` and uncompressed ``.vcf`` files are
all read the same way. The underlying stream is owned by the
``LineSource`` and is closed on every exit path when used as a context
manager::

	with LineSource("calls.vcf.gz") as src:
		for line in src:
			...
"""

from __future__ import annotations

import gzip
import io
import logging
import zlib
from typing import IO, Iterator, Optional

from ..config import GZIP_MAGIC, MAX_LINE_LENGTH
from ..exceptions import CannotOpenError, CorruptStreamError, LineTooLongError

logger = logging.getLogger(__name__)


def is_gzipped(path: str) -> bool:
	"""Return True if the file starts with the gzip magic bytes."""
	with open(path, "rb") as fh:
		return fh.read(2) == GZIP_MAGIC


class LineSource:
	"""Iterate the lines of a (compressed) text file.

	Parameters
	----------
	path : str
		File to read. gzip / bgzip members are decompressed transparently.
	max_line_length : int
		Longest accepted line, excluding its terminator. Longer lines raise
		``LineTooLongError`` instead of being truncated.
	"""

	def __init__(self, path: str, max_line_length: int = MAX_LINE_LENGTH):
		self.path = str(path)
		self.max_line_length = max_line_length
		self.line_number = 0
		self._fh: Optional[IO[str]] = None

	# -- lifecycle ---------------------------------------------------------
	def open(self) -> "LineSource":
		if self._fh is not None:
			raise ValueError(f"{self.path} is already open")
		try:
			if is_gzipped(self.path):
				raw = gzip.open(self.path, "rb")
			else:
				raw = open(self.path, "rb")
		except OSError as exc:
			raise CannotOpenError(self.path, exc.strerror or str(exc)) from exc
		# newline=None: '\n', '\r\n' and '\r' all end a line and are stripped to '\n'
		self._fh = io.TextIOWrapper(raw, encoding="utf-8", newline=None)
		self.line_number = 0
		logger.debug("Opened %s", self.path)
		return self

	def close(self) -> None:
		if self._fh is not None:
			self._fh.close()
			self._fh = None
			logger.debug("Closed %s after %d lines", self.path, self.line_number)

	@property
	def closed(self) -> bool:
		return self._fh is None

	def __enter__(self) -> "LineSource":
		return self.open()

	def __exit__(self, exc_type, exc, tb) -> None:
		self.close()

	# -- reading -----------------------------------------------------------
	def next_line(self) -> Optional[str]:
		"""Return the next line without its terminator, or None at end of stream."""
		if self._fh is None:
			raise ValueError(f"{self.path} is not open")
		# one character past the limit is enough to detect an over-long line
		try:
			line = self._fh.readline(self.max_line_length + 1)
		except (UnicodeDecodeError, EOFError, gzip.BadGzipFile, zlib.error) as exc:
			raise CorruptStreamError(f"cannot decode {self.path}: {exc}", self.line_number + 1) from exc
		if not line:
			return None
		self.line_number += 1
		if line.endswith("\n"):
			line = line[:-1]
		if len(line) > self.max_line_length:
			raise LineTooLongError(self.max_line_length, self.line_number)
		return line

	def __iter__(self) -> Iterator[str]:
		while True:
			line = self.next_line()
			if line is None:
				return
			yield line
