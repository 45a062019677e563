#!/usr/bin/env python3
"""
Console utilities to handle encoding issues and build the output consoles
"""

import os
import sys

from rich.console import Console


def setup_windows_console():
    """
    Setup Windows console to handle Unicode properly and avoid encoding errors
    """
    if sys.platform.startswith('win'):
        # Set console to UTF-8 encoding
        if hasattr(sys.stdout, 'reconfigure'):
            sys.stdout.reconfigure(encoding='utf-8', errors='replace')
            sys.stderr.reconfigure(encoding='utf-8', errors='replace')

        os.environ['PYTHONIOENCODING'] = 'utf-8:replace'


def make_console(styled: bool = True, stderr: bool = False) -> Console:
    """Console for definition output; plain output never carries color codes"""
    return Console(
        stderr=stderr,
        highlight=False,
        no_color=not styled,
        soft_wrap=True,
    )
