"""
npmfeed: configure npm authentication for a private package feed.

Reads NPM_PRIVATE_FEED* environment variables, appends the feed token to
.npmrc and maps the feed scope to its registry with `npm config set`.
"""

__version__ = "1.0.0"
