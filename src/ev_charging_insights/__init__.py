"""EV charging insights - normalized, filterable metrics over charging-station records."""

__version__ = "0.1.0"
