#!/usr/bin/env python3
"""
Entry point for running fstree as a module.

This allows running fstree with: python -m fstree
"""

if __name__ == "__main__":
    from fstree.cli import cli

    cli()
