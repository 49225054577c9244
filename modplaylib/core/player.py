#!/usr/bin/env python3

from modplaylib.core.renderer import Renderer
from modplaylib.core.reporter import Reporter

#============================================

class Player():
	def __init__(self, renderer: Renderer, reporter: Reporter,
		render_data: str = "Media data"):
		self._renderer = renderer
		self.reporter = reporter
		self.render_data = render_data

	#============================
	@property
	def renderer(self) -> Renderer:
		return self._renderer

	#============================
	def set_renderer(self, renderer: Renderer) -> None:
		self._renderer = renderer

	#============================
	def play(self, item) -> None:
		# rendered once per request, not once per leaf
		self._renderer.render(self.render_data, self.reporter)
		item.play(self.reporter)
