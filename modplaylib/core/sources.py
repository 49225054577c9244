#!/usr/bin/env python3

from modplaylib.core import utils
from modplaylib.core.errors import InvalidSource
from modplaylib.core.reporter import Reporter

#============================================

class MediaSource():
	def __init__(self, kind: str, origin: str):
		self._kind = utils.normalize_kind(kind)
		self._origin = utils.normalize_origin(origin)

	#============================
	@property
	def kind(self) -> str:
		return self._kind

	#============================
	@property
	def origin(self) -> str:
		return self._origin

	#============================
	@property
	def cached(self) -> bool:
		return False

	#============================
	def fetch(self, reporter: Reporter) -> str:
		if self._kind == 'local':
			return f"Data from local file: {self._origin}"
		if self._kind == 'hls':
			return f"Streamed data from HLS: {self._origin}"
		if self._kind == 'api':
			return f"Data from remote API: {self._origin}"
		raise RuntimeError("unsupported source kind")

	#============================
	def to_dict(self) -> dict:
		return {
			'kind': self._kind,
			'origin': self._origin,
		}

	#============================
	def __repr__(self) -> str:
		return f"MediaSource({self._kind!r}, {self._origin!r})"

#============================================

class CachedSource():
	"""
	Proxy that fetches from its inner source once and replays the result.

	Not safe to share between threads: the check and the store are separate
	steps, so two concurrent first calls would both reach the inner source.
	"""

	def __init__(self, source: MediaSource):
		if source.kind == 'local':
			raise InvalidSource("proxy caching is only available for remote sources")
		self._source = source
		self._content = None

	#============================
	@property
	def kind(self) -> str:
		return self._source.kind

	#============================
	@property
	def origin(self) -> str:
		return self._source.origin

	#============================
	@property
	def cached(self) -> bool:
		return True

	#============================
	@property
	def is_filled(self) -> bool:
		return self._content is not None

	#============================
	def fetch(self, reporter: Reporter) -> str:
		if self._content is None:
			self._content = self._source.fetch(reporter)
			reporter.emit('cache_store', "Caching remote data.")
		else:
			reporter.emit('cache_hit', "Using cached data.")
		return self._content

	#============================
	def to_dict(self) -> dict:
		data = self._source.to_dict()
		data['cache'] = True
		return data

	#============================
	def __repr__(self) -> str:
		return f"CachedSource({self._source!r})"

#============================================

def build_source(kind: str, origin: str, cache: bool = False):
	source = MediaSource(kind, origin)
	if cache:
		return CachedSource(source)
	return source
