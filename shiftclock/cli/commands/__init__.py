# shiftclock/cli/commands/__init__.py
# Command modules; importing each registers its commands on the root app
