# shiftclock/config/__init__.py
# Settings dataclass & JSON-backed settings manager
