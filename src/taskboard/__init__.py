"""taskboard: a server-rendered task list with htmx fragments and a flat-file store."""

__version__ = "0.1.0"
