"""Tests for environment-driven settings."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from lifeconv.config.settings import CodecSettings, Settings, get_settings, settings


class TestCodecSettings:
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = CodecSettings()
        assert cfg.rle_line_width == 70
        assert cfg.rle_rule == "B3/S23"

    def test_env_override(self) -> None:
        env = {"LIFECONV_RLE_LINE_WIDTH": "20", "LIFECONV_RLE_RULE": "B36/S23"}
        with patch.dict(os.environ, env, clear=True):
            cfg = CodecSettings()
        assert cfg.rle_line_width == 20
        assert cfg.rle_rule == "B36/S23"

    def test_line_width_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            CodecSettings(rle_line_width=0)


class TestSettings:
    def test_force_overwrite_from_env(self) -> None:
        with patch.dict(os.environ, {"LIFECONV_FORCE_OVERWRITE": "true"}, clear=True):
            assert Settings(_env_file=None).force_overwrite is True

    def test_singleton(self) -> None:
        assert get_settings() is settings
