"""
🍎 applebridge
Apple Notes, Calendar and Contacts over osascript.
"""

__version__ = "0.1.0"
