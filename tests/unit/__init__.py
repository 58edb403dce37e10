"""
Unit tests package.

Contains unit tests for the codec, builder, checksum, generator, model,
configuration, logging and CLI modules in isolation.
"""
