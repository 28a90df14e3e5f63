#!/usr/bin/env python3
"""
Convenience entry point for running nexus-slots directly.

Usage: python nexus_slots.py [command] [options]
"""

from nexus_scheduling.cli.app import app

if __name__ == "__main__":
    app()
