"""CLI package for the Local Library catalog"""
from .main import cli

__all__ = ['cli']
