"""Shared utilities."""

from .config import EncoderConfig, MatchConfig, default_encoder_config, default_match_config

__all__ = ['EncoderConfig', 'MatchConfig', 'default_encoder_config', 'default_match_config']
