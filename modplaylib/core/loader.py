#!/usr/bin/env python3

import os
import yaml
from modplaylib.core import utils
from modplaylib.core.errors import ConfigError
from modplaylib.core.errors import InvalidSource
from modplaylib.core.errors import InvalidSourceKind
from modplaylib.core.playlist import MediaFile
from modplaylib.core.playlist import Playlist
from modplaylib.core.processing import ProcessingChain
from modplaylib.core.sources import build_source

#============================================

class SessionConfig():
	def __init__(self):
		self.yaml_file = None
		self.data = {}
		self.renderer = 'hardware'
		self.render_data = "Media data"
		self.playlist = Playlist('main')

#============================================

class SessionLoader():
	def __init__(self, yaml_file: str, renderer_override: str = None):
		self.yaml_file = yaml_file
		self.renderer_override = renderer_override

	#============================
	def load(self) -> SessionConfig:
		config = SessionConfig()
		config.yaml_file = self.yaml_file
		config.data = self._load_yaml()
		self._validate_required_keys(config.data)
		player = self._parse_player(config.data.get('player', {}))
		config.renderer = player['renderer']
		config.render_data = player['render_data']
		if self.renderer_override is not None:
			config.renderer = self._parse_renderer(self.renderer_override)
		playlist_data = config.data.get('playlist')
		if playlist_data is not None:
			config.playlist = self._parse_playlist(playlist_data, 'playlist')
		return config

	#============================
	def _load_yaml(self) -> dict:
		if not os.path.exists(self.yaml_file):
			raise ConfigError(f"file not found: {self.yaml_file}")
		file_size = os.path.getsize(self.yaml_file)
		if file_size > 10 ** 6:
			raise ConfigError("yaml file is larger than 1MB")
		with open(self.yaml_file, 'r') as data_file:
			try:
				data = yaml.safe_load(data_file)
			except yaml.YAMLError as exc:
				raise ConfigError(f"yaml parse error: {exc}") from exc
		if not isinstance(data, dict):
			raise ConfigError("session yaml must be a mapping at the top level")
		return data

	#============================
	def _validate_required_keys(self, data: dict) -> None:
		version = data.get('modplay')
		if type(version) is not int or version != 1:
			raise ConfigError("modplay must be set to 1")
		allowed_keys = ('modplay', 'player', 'playlist')
		for key in data:
			if key not in allowed_keys:
				raise ConfigError(f"unknown top-level key: {key}")

	#============================
	def _parse_player(self, player: dict) -> dict:
		if player is None:
			player = {}
		if not isinstance(player, dict):
			raise ConfigError("player must be a mapping")
		render_data = player.get('render_data', "Media data")
		if not isinstance(render_data, str) or render_data.strip() == '':
			raise ConfigError("player.render_data must be a non-empty string")
		return {
			'renderer': self._parse_renderer(player.get('renderer', 'hardware')),
			'render_data': render_data,
		}

	#============================
	def _parse_renderer(self, raw_renderer) -> str:
		renderer = str(raw_renderer).strip().lower()
		if renderer not in utils.RENDERER_KINDS:
			raise ConfigError("player.renderer must be hardware or software")
		return renderer

	#============================
	def _parse_playlist(self, data: dict, path: str) -> Playlist:
		if not isinstance(data, dict):
			raise ConfigError(f"{path} must be a mapping")
		name = data.get('name', 'main')
		if not isinstance(name, str) or name.strip() == '':
			raise ConfigError(f"{path}.name must be a non-empty string")
		items = data.get('items', [])
		if items is None:
			items = []
		if not isinstance(items, list):
			raise ConfigError(f"{path}.items must be a list")
		playlist = Playlist(name)
		for index, entry in enumerate(items):
			entry_path = f"{path}.items[{index}]"
			playlist.add(self._parse_entry(entry, entry_path))
		return playlist

	#============================
	def _parse_entry(self, entry: dict, path: str):
		if not isinstance(entry, dict):
			raise ConfigError(f"{path} must be a mapping")
		if 'playlist' in entry and 'source' in entry:
			raise ConfigError(f"{path} must define source or playlist, not both")
		if 'playlist' in entry:
			return self._parse_playlist(entry['playlist'], f"{path}.playlist")
		if 'source' in entry:
			return self._parse_media_file(entry, path)
		raise ConfigError(f"{path} must define source or playlist")

	#============================
	def _parse_media_file(self, entry: dict, path: str) -> MediaFile:
		source_data = entry['source']
		if not isinstance(source_data, dict):
			raise ConfigError(f"{path}.source must be a mapping")
		cache = entry.get('cache', False)
		if not isinstance(cache, bool):
			raise ConfigError(f"{path}.cache must be true or false")
		features = entry.get('features', [])
		if features is None:
			features = []
		if not isinstance(features, list):
			raise ConfigError(f"{path}.features must be a list")
		for index, feature in enumerate(features):
			if not isinstance(feature, str):
				raise ConfigError(f"{path}.features[{index}] must be a string")
		try:
			source = build_source(source_data.get('kind'),
				source_data.get('origin'), cache=cache)
			chain = ProcessingChain(source, features)
		except (InvalidSource, InvalidSourceKind) as exc:
			raise ConfigError(f"{path}: {exc}") from exc
		except RuntimeError as exc:
			raise ConfigError(f"{path}.features: {exc}") from exc
		return MediaFile(chain)
