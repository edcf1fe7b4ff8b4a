"""Our Impact API: cities, comments, likes, learning resources and weather readings."""

__version__ = "1.0.0"
