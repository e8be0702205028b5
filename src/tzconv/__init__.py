"""tzconv — convert a local wall-clock date/time between IANA timezones."""

__version__ = "0.1.0"
