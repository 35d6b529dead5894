# shiftclock/__init__.py
# Work-shift timer w/ earnings tracking, persisted history & CSV export

__version__ = "0.1.0"
