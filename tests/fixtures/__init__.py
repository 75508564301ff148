"""Shared pytest fixtures for the lending tests."""

from .api import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .factories import *  # noqa: F401,F403
