"""
Harness Module

Probe sequencing, configuration and CLI.

This module provides:
- YAML-based configuration loading
- The quick and full probe profiles
- Status-line reporting with fixed markers
- The probe runner and its CLI
"""

__version__ = "0.1.0"
