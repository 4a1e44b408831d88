"""Fuzz tests for cldrkit.

This package contains:
- test_yaml_allow_list: generated tags and documents against the YAML allow-list
- test_number_formatting: generated patterns and numbers against NumberFormatter

Python 3.13+.
"""
