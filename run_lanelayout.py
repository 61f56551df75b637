#!/usr/bin/env python3
"""
Convenience entry point for running lanelayout directly.

Usage: python run_lanelayout.py [command] [options]
"""

from lanelayout.cli.app import app

if __name__ == "__main__":
    app()
