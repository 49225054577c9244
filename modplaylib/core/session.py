#!/usr/bin/env python3

from modplaylib.core.errors import EmptyPlaylist
from modplaylib.core.loader import SessionConfig
from modplaylib.core.player import Player
from modplaylib.core.playlist import MediaFile
from modplaylib.core.playlist import Playlist
from modplaylib.core.processing import build_chain
from modplaylib.core.renderer import Renderer
from modplaylib.core.reporter import Reporter
from modplaylib.core.sources import build_source

#============================================

class PlayerSession():
	def __init__(self, reporter: Reporter, playlist: Playlist = None,
		renderer: Renderer = None, render_data: str = "Media data"):
		if playlist is None:
			playlist = Playlist('main')
		if renderer is None:
			renderer = Renderer('hardware')
		self.reporter = reporter
		self.playlist = playlist
		self.player = Player(renderer, reporter, render_data=render_data)

	#============================
	@classmethod
	def from_config(cls, config: SessionConfig, reporter: Reporter):
		return cls(reporter, playlist=config.playlist,
			renderer=Renderer(config.renderer), render_data=config.render_data)

	#============================
	@property
	def renderer(self) -> Renderer:
		return self.player.renderer

	#============================
	def add_item(self, kind: str, origin: str, cache: bool = False,
		subtitles: bool = False, equalizer: bool = False,
		watermark: bool = False) -> MediaFile:
		source = build_source(kind, origin, cache=cache)
		chain = build_chain(source, subtitles=subtitles, equalizer=equalizer,
			watermark=watermark)
		item = MediaFile(chain)
		self.playlist.add(item)
		return item

	#============================
	def play(self) -> None:
		if self.playlist.is_empty():
			raise EmptyPlaylist("playlist is empty")
		self.player.play(self.playlist)

	#============================
	def switch_renderer(self) -> Renderer:
		renderer = self.player.renderer.toggled()
		self.player.set_renderer(renderer)
		return renderer
