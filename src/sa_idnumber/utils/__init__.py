"""Utilities module.

This module provides shared exception classes.
"""
