"""
Utility functions and helpers.

This package contains reusable utilities for file operations, template
rendering, name normalization, logging and progress reporting.

Modules:
- files: Directory creation and text file I/O
- log: Logging configuration
- naming: camelCase / snake_case / kebab-case conversion
- progress: Console progress reporting
- templates: Jinja2 template loading
"""
