#!/usr/bin/env python3
"""
Main entry point for the layered templates command line tool
"""

from layered_templates.cli import run

if __name__ == "__main__":
    run()
