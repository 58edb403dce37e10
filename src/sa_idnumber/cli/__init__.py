"""CLI module.

This module provides the sa-idnumber command-line interface.
"""
