# shiftclock/core/__init__.py
# Pure domain layer: timer state machine, wage rules, formatting & session orchestration
