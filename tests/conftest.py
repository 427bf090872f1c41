"""Test configuration and fixtures."""

import os

# Settings are read when providers resolve them
os.environ["ENVIRONMENT"] = "test"
