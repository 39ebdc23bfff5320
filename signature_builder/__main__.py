"""Allow running the builder with ``python -m signature_builder``."""

from .main import run

run()
