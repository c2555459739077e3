"""Qt presentation layer: widgets, scheduler and settings adapters."""
