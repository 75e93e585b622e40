"""Pytest fixtures for framework tests."""
import os

import pytest

# Headless pygame: no window, no audio device
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame  # noqa: E402


@pytest.fixture
def pygame_init():
    """Initialize pygame with a small display for testing."""
    pygame.init()
    pygame.display.set_mode((100, 100))
    yield
    pygame.quit()
