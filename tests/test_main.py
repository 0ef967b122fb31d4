"""Tests for command-line handling."""

import pytest

from terraineditor import config
from terraineditor.controller import demo_generator
from terraineditor.errors import GenerationError
from terraineditor.main import build_parser, resolve_generator


class TestCommandLine:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(config.GENERATOR_ENV_VAR, raising=False)
        args = build_parser().parse_args([])

        assert args.generator is None
        assert args.defaults is None
        assert args.debug is False
        assert args.log_file is None

    def test_generator_from_environment(self, monkeypatch):
        monkeypatch.setenv(config.GENERATOR_ENV_VAR, "mypkg.rivers:generate")
        args = build_parser().parse_args([])

        assert args.generator == "mypkg.rivers:generate"

    def test_option_overrides_environment(self, monkeypatch):
        monkeypatch.setenv(config.GENERATOR_ENV_VAR, "mypkg.rivers:generate")
        args = build_parser().parse_args(["--generator", "other:gen", "--debug", "--log-file", "out.log"])

        assert args.generator == "other:gen"
        assert args.debug is True
        assert args.log_file == "out.log"


class TestResolveGenerator:
    def test_no_path_uses_demo(self):
        assert resolve_generator(None) is demo_generator.generate_river
        assert resolve_generator("") is demo_generator.generate_river

    def test_path_is_loaded(self):
        generator = resolve_generator("terraineditor.controller.demo_generator:generate_river")

        assert generator is demo_generator.generate_river

    def test_bad_path_raises(self):
        with pytest.raises(GenerationError):
            resolve_generator("terraineditor.nowhere:gen")
