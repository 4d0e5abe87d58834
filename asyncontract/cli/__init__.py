# asyncontract/cli/__init__.py
"""
asyncontract CLI.

Usage:
    asyncontract catalog shop.contracts -o shop.catalog.yaml
    asyncontract spec -m shop.contracts -p "shop.contracts.events.**"
    asyncontract contracts shop.contracts.yaml -o generated
"""

from asyncontract.cli.cli import app

__all__ = ["app"]
