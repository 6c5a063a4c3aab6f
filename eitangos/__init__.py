"""
EITANGOS vocabulary monitor.

Watches an X (Twitter) account for "term / translation" posts and stores
new pairs in an Appwrite collection.
"""

__version__ = "1.0.0"
