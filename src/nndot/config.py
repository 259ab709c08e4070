"""Centralized configuration for nndot."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParseConfig:
    """Configuration for the parsing front door."""

    allow_trailing: bool = False
