"""CLI package for the library lending catalog"""
from .main import cli

__all__ = ['cli']
