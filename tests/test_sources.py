#!/usr/bin/env python3

"""
Tests for media sources and the caching proxy.
"""

# Standard Library
import os
import sys

# PIP3 modules
import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from modplaylib.core.errors import InvalidSource
from modplaylib.core.errors import InvalidSourceKind
from modplaylib.core.reporter import Reporter
from modplaylib.core.sources import CachedSource
from modplaylib.core.sources import MediaSource
from modplaylib.core.sources import build_source

#============================================

class CountingSource(MediaSource):
	def __init__(self, kind: str, origin: str):
		super().__init__(kind, origin)
		self.fetch_count = 0

	def fetch(self, reporter: Reporter) -> str:
		self.fetch_count += 1
		return super().fetch(reporter)

#============================================

@pytest.mark.parametrize("kind, origin, expected", [
	('local', 'movie.mp4', "Data from local file: movie.mp4"),
	('hls', 'stream.example.com', "Streamed data from HLS: stream.example.com"),
	('api', 'api.example.com/v1', "Data from remote API: api.example.com/v1"),
])
def test_fetch_content_per_kind(kind: str, origin: str, expected: str) -> None:
	"""
	Ensure each source kind tags its content with the origin.
	"""
	reporter = Reporter(quiet=True)
	source = MediaSource(kind, origin)
	assert source.fetch(reporter) == expected
	assert reporter.history == []

#============================================

def test_kind_is_case_insensitive() -> None:
	source = MediaSource(' HLS ', 'stream.example.com')
	assert source.kind == 'hls'

#============================================

@pytest.mark.parametrize("origin", ['', '   ', None])
def test_empty_origin_is_rejected(origin) -> None:
	with pytest.raises(InvalidSource):
		MediaSource('local', origin)

#============================================

def test_unknown_kind_is_rejected() -> None:
	with pytest.raises(InvalidSourceKind):
		MediaSource('ftp', 'example.com')

#============================================

def test_cached_source_fetches_inner_once() -> None:
	"""
	Ensure k fetches reach the inner source once and replay the same value.
	"""
	reporter = Reporter(quiet=True)
	inner = CountingSource('hls', 'stream.example.com')
	proxy = CachedSource(inner)
	assert proxy.is_filled is False
	results = [proxy.fetch(reporter) for _ in range(4)]
	assert inner.fetch_count == 1
	assert proxy.is_filled is True
	assert len(set(results)) == 1
	assert results[0] == "Streamed data from HLS: stream.example.com"
	assert reporter.events().count('cache_store') == 1
	assert reporter.events().count('cache_hit') == 3
	assert reporter.events()[0] == 'cache_store'

#============================================

def test_cached_source_rejects_local() -> None:
	with pytest.raises(InvalidSource):
		CachedSource(MediaSource('local', 'movie.mp4'))

#============================================

def test_build_source_wraps_when_cached() -> None:
	plain = build_source('api', 'api.example.com')
	cached = build_source('api', 'api.example.com', cache=True)
	assert isinstance(plain, MediaSource)
	assert isinstance(cached, CachedSource)
	assert cached.kind == 'api'
	assert cached.origin == 'api.example.com'
	assert cached.to_dict() == {'kind': 'api', 'origin': 'api.example.com', 'cache': True}
