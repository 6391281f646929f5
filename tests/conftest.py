import pathlib
import typing

import pytest
import yaml


@pytest.fixture
def write_config (tmp_path: pathlib.Path) -> typing.Callable[[dict], str]:

	"""Return a helper that writes a YAML config file and returns its path."""

	def write (config: dict) -> str:

		"""Dump the config to a fresh file in the test's temp directory."""

		path = tmp_path / "chromaset.yaml"
		path.write_text(yaml.safe_dump(config))
		return str(path)

	return write
