"""
                GrubDash Ordering API

A small REST backend for a restaurant ordering application:
dishes on the menu and the orders placed against them.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
