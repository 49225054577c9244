#!/usr/bin/env python3

"""
Tests for playlist traversal.
"""

# Standard Library
import os
import sys
import unittest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from modplaylib.core.playlist import MediaFile
from modplaylib.core.playlist import Playlist
from modplaylib.core.processing import ProcessingChain
from modplaylib.core.reporter import Reporter
from modplaylib.core.sources import MediaSource

#============================================

def make_file(origin: str, features: list = None) -> MediaFile:
	"""
	Build a local media file with the given features.

	Args:
		origin: File name.
		features: Ordered feature names.
	"""
	if features is None:
		features = []
	return MediaFile(ProcessingChain(MediaSource('local', origin), features))

#============================================

class PlaylistTest(unittest.TestCase):
	#============================================
	def test_empty_playlist_emits_nothing(self) -> None:
		"""Ensure an empty group plays as a no-op."""
		reporter = Reporter(quiet=True)
		playlist = Playlist()
		playlist.play(reporter)
		self.assertTrue(playlist.is_empty())
		self.assertEqual(reporter.history, [])

	#============================================
	def test_children_play_in_insertion_order(self) -> None:
		"""Ensure siblings play left to right with each full sequence intact."""
		reporter = Reporter(quiet=True)
		playlist = Playlist()
		playlist.add(make_file("a.mp4", ['subtitles']))
		playlist.add(make_file("b.mp4"))
		playlist.add(make_file("c.mp4", ['watermark']))
		playlist.play(reporter)
		self.assertEqual(reporter.lines(), [
			"Processing: Data from local file: a.mp4",
			"Rendering subtitles.",
			"Processing: Data from local file: b.mp4",
			"Processing: Data from local file: c.mp4",
			"Adding watermark.",
		])

	#============================================
	def test_nested_playlists_play_depth_first(self) -> None:
		"""Ensure nesting depth does not change the left-to-right order."""
		reporter = Reporter(quiet=True)
		inner = Playlist('inner')
		inner.add(make_file("b.mp4"))
		deepest = Playlist('deepest')
		deepest.add(make_file("c.mp4"))
		inner.add(deepest)
		inner.add(Playlist('empty'))
		root = Playlist()
		root.add(make_file("a.mp4"))
		root.add(inner)
		root.add(make_file("d.mp4"))
		root.play(reporter)
		origins = [line.rsplit(' ', 1)[-1] for line in reporter.lines()]
		self.assertEqual(origins, ["a.mp4", "b.mp4", "c.mp4", "d.mp4"])
		self.assertEqual(len(root), 3)
		self.assertEqual(root.leaf_count(), 4)

	#============================================
	def test_playlist_cannot_contain_itself(self) -> None:
		playlist = Playlist()
		with self.assertRaises(RuntimeError):
			playlist.add(playlist)

	#============================================
	def test_to_dict_keeps_structure(self) -> None:
		inner = Playlist('extras')
		inner.add(make_file("b.mp4", ['equalizer']))
		root = Playlist('main')
		root.add(make_file("a.mp4"))
		root.add(inner)
		self.assertEqual(root.to_dict(), {
			'playlist': {
				'name': 'main',
				'items': [
					{'source': {'kind': 'local', 'origin': 'a.mp4'}},
					{'playlist': {
						'name': 'extras',
						'items': [
							{'source': {'kind': 'local', 'origin': 'b.mp4'},
								'features': ['equalizer']},
						],
					}},
				],
			}
		})

#============================================

def main() -> None:
	"""Run the unit tests."""
	unittest.main()

#============================================

if __name__ == "__main__":
	main()
