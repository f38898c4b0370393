"""
treefind - Core Package

A small command-line search tool that walks a directory tree looking for
files and directories whose path contains a substring, showing a spinner
while the search runs.
"""

__version__ = "0.1.0"
__author__ = "treefind Team"
