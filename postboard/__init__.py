"""
Postboard - Minimal Password-Protected Bulletin Board

A small web service for posting, reading, editing and deleting text posts.
Each post carries its own password; there are no user accounts.
"""

__version__ = "0.1.0"
__author__ = "Postboard Project"
