#!/usr/bin/env python3

"""
Interactive text menu driving a PlayerSession over stdin/stdout.
"""

# PIP3 modules
from rich.console import Console
from rich.text import Text

# local repo modules
from modplaylib.core import utils
from modplaylib.core.errors import EmptyPlaylist
from modplaylib.core.errors import InvalidMenuInput
from modplaylib.core.errors import InvalidSource
from modplaylib.core.errors import InvalidSourceKind
from modplaylib.core.reporter import NORD_COLORS
from modplaylib.core.session import PlayerSession

#============================================

ORIGIN_PROMPTS = {
	'local': "Enter file name: ",
	'hls': "Enter stream URL: ",
	'api': "Enter API endpoint: ",
}

FEATURE_PROMPTS = (
	('subtitles', "Add subtitles feature? (y/n): "),
	('equalizer', "Add audio equalizer feature? (y/n): "),
	('watermark', "Add watermark feature? (y/n): "),
)

#============================================

class MenuLoop():
	def __init__(self, session: PlayerSession, console: Console = None,
		read_line=input):
		if console is None:
			console = session.reporter.console
		self.session = session
		self.console = console
		self.read_line = read_line
		self.running = False

	#============================
	def run(self) -> None:
		self.running = True
		while self.running:
			self._show_menu()
			raw_choice = self._ask("Choose an option (1-4): ")
			choice = utils.parse_menu_choice(raw_choice)
			if choice is None:
				raise InvalidMenuInput(f"expected an option number, got {raw_choice!r}")
			self.handle_choice(choice)

	#============================
	def handle_choice(self, choice: int) -> None:
		if choice == 1:
			self.add_media_item()
		elif choice == 2:
			self.play_playlist()
		elif choice == 3:
			renderer = self.session.switch_renderer()
			self._say(f"Switched to {renderer.label} renderer.")
		elif choice == 4:
			self.running = False
			self._say("Exiting Modular Media Player. Goodbye!")
		else:
			self._say("Invalid option. Please choose between 1 and 4.")

	#============================
	def add_media_item(self) -> None:
		raw_kind = self._ask("Enter media source type (local/hls/api): ")
		try:
			kind = utils.normalize_kind(raw_kind)
		except InvalidSourceKind:
			self._error("Invalid source type.")
			return
		raw_origin = self._ask(ORIGIN_PROMPTS[kind])
		try:
			origin = utils.normalize_origin(raw_origin)
		except InvalidSource as exc:
			self._error(f"Invalid source: {exc}.")
			return
		cache = False
		# local files are never proxied
		if kind != 'local':
			cache = utils.is_yes(self._ask("Enable proxy caching for this source? (y/n): "))
		answers = {}
		for feature, prompt in FEATURE_PROMPTS:
			answers[feature] = utils.is_yes(self._ask(prompt))
		self.session.add_item(kind, origin, cache=cache,
			subtitles=answers['subtitles'], equalizer=answers['equalizer'],
			watermark=answers['watermark'])
		self._say("Media item added successfully!")

	#============================
	def play_playlist(self) -> None:
		try:
			self.session.play()
		except EmptyPlaylist:
			self._error("Playlist is empty. Please add media first.")
		except RuntimeError as exc:
			self._error(f"Playback failed: {exc}")

	#============================
	def _show_menu(self) -> None:
		self._say("")
		self.console.print(
			Text(" === Modular Media Player Menu === ", style=f"bold {NORD_COLORS['header']}")
		)
		self._say("1. Add a new media item to playlist")
		self._say("2. Play current playlist")
		self._say(f"3. Switch renderer (Current: {self.session.renderer.label})")
		self._say("4. Exit")

	#============================
	def _ask(self, prompt: str) -> str:
		self.console.print(Text(prompt), end="")
		try:
			return self.read_line()
		except EOFError as exc:
			raise InvalidMenuInput("unexpected end of input") from exc

	#============================
	def _say(self, text: str) -> None:
		self.console.print(Text(text))

	#============================
	def _error(self, text: str) -> None:
		self.console.print(Text(text, style=NORD_COLORS['error']))
