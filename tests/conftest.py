"""Test configuration and fixtures for library_lending."""

from tests.fixtures import *  # noqa: F401,F403
