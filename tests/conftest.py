"""Test configuration and fixtures."""

import os

import logfire

os.environ.setdefault("ENVIRONMENT", "test")

# Nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)
