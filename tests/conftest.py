"""Shared pytest configuration for Identifi tests.

Fixtures from identifi.testing.fixtures (private_key, fake_backend,
sample_document, sample_packet, document_factory) are loaded as a plugin.
"""

pytest_plugins = ["identifi.testing.fixtures"]
