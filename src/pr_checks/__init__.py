"""Pull-request review checks: diff heuristics and metadata rules reported to a host review tool."""

__version__ = "0.1.0"
