"""Headless game logic: platformer physics, particle emitters, audio bookkeeping and small classic games."""

__version__ = "0.1.0"