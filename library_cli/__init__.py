"""CLI package for the Simple Library database"""
from .main import cli

__all__ = ['cli']
